"""Library-level error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class GenericFunctionsError(Exception):
    """Base class for errors raised by generic-functions."""


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidSettingError(GenericFunctionsError):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}.")
        self.name = name
        self.value = value
        self.reason = reason


# ============================================================================
#                           Catalog errors
# ============================================================================


class CatalogEntryNotFoundError(GenericFunctionsError, KeyError):
    """Raised when a function or constant is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No catalog entry named '{name}'.")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes.
        return str(self.args[0])
