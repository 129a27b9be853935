"""Entry points (command-line interfaces) for generic-functions."""
