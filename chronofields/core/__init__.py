"""
chronofields core library.

This package contains the core functionality:
- temporal: units, fields, week engine, resolver and the ISO collaborators
- settings: configurable defaults (resolver style, week definition)
"""

__all__: list[str] = []
