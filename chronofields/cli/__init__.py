"""
chronofields command line interface.
"""

from chronofields.cli.main import app

__all__ = ["app"]
