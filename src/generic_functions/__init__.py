"""generic-functions: a general-purpose utility function library.

The helpers live in :mod:`generic_functions.core` (collections, arrays,
objects, strings, functions, type guards, math, numbers, dates) and
:mod:`generic_functions.utils` (helpers that do I/O or carry heavier
logic). :mod:`generic_functions.catalog` describes the library itself and
backs the ``generic-functions`` command-line browser.
"""

__all__ = ["__version__"]

__version__ = "0.9.7"
