"""The ``generic-functions`` command-line interface."""

from .main import generic_functions

__all__ = ["generic_functions"]
