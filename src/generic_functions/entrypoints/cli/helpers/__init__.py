"""CLI helpers for generic-functions.

Terminal hyperlinks when supported, the ``-L NAME=LEVEL`` option parser, and
message emitters that write to stderr with emoji to ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "parse_log_level", "success", "warn"]
