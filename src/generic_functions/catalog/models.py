"""Read models describing the library's public functions and constants."""

from __future__ import annotations

from dataclasses import dataclass

# --- Functions ---


@dataclass(frozen=True, slots=True)
class DocParam:
    """One parameter of a documented function.

    Conventions:
      - `type` is the annotation as written in the source, ``"Any"`` when absent.
      - `default_value` is the ``repr`` of the default, None when required.
      - `kind` is ``"positional"``, ``"keyword"``, ``"var_positional"`` or
        ``"var_keyword"``.
    """

    name: str
    type: str
    description: str = ""
    optional: bool = False
    default_value: str | None = None
    kind: str = "positional"


@dataclass(frozen=True, slots=True)
class DocReturn:
    """Return value of a documented function."""

    type: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class DocFunction:
    """A public function, as described by its signature and docstring."""

    name: str
    category: str
    description: str
    syntax: str
    params: tuple[DocParam, ...] = ()
    returns: DocReturn | None = None
    example: str = ""
    source_file: str | None = None

    @property
    def summary(self) -> str:
        """First line of the description."""
        return self.description.split("\n", 1)[0]


# --- Constants ---


@dataclass(frozen=True, slots=True)
class DocConstant:
    """A public constant."""

    name: str
    category: str
    description: str
    type: str
    value: str
    source_file: str | None = None

    @property
    def summary(self) -> str:
        """First line of the description."""
        return self.description.split("\n", 1)[0]


# --- Catalog ---


@dataclass(frozen=True, slots=True)
class PackageInfo:
    """Distribution metadata of the library."""

    name: str
    version: str
    description: str = ""
    license: str = ""
    homepage: str = ""
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Catalog:
    """Everything the library exposes, ready to be searched and displayed."""

    functions: tuple[DocFunction, ...]
    constants: tuple[DocConstant, ...]
    package_info: PackageInfo
