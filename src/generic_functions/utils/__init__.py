"""Heavier helpers: HTTP, country lookup, hashing and regex extraction.

These are kept out of :mod:`generic_functions.core` because they perform I/O
or depend on third-party libraries. Import them from their defining modules.
"""
