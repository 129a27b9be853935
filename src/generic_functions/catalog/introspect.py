"""Build the catalog by introspecting the library's own modules.

Functions are described from their signature (:func:`inspect.signature`) and
their Google-style docstring: the text before the first section is the
description, ``Args:`` documents the parameters, ``Returns:`` the return value
and ``Example:`` (or ``Examples:``) gives the example. Functions without an
``Args:`` section still list their parameters, with empty descriptions.
"""

from __future__ import annotations

import functools
import importlib
import inspect
import logging
import re
import textwrap
from importlib import metadata
from types import ModuleType
from typing import Any

import generic_functions
from generic_functions import constants as constants_module

from .models import Catalog, DocConstant, DocFunction, DocParam, DocReturn, PackageInfo

__all__ = [
    "CORE_MODULES",
    "DISTRIBUTION_NAME",
    "UTILS_MODULES",
    "build_catalog",
    "describe_constant",
    "describe_function",
    "parse_docstring",
]

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "generic-functions"

CORE_MODULES = (
    "array",
    "collection",
    "object",
    "string",
    "function",
    "guards",
    "arithmetic",
    "numeric",
    "date",
    "utility",
    "filtering",
)
UTILS_MODULES = ("api", "country", "extract", "hashing")

_SECTION = re.compile(
    r"^(Args|Arguments|Returns|Raises|Example|Examples|Attributes|Yields|Note|Notes):\s*$"
)
_ARG_ENTRY = re.compile(r"^(\*{0,2}\w+)(?:\s*\([^)]*\))?:\s*(.*)$")
_PARAM_KINDS = {
    inspect.Parameter.POSITIONAL_ONLY: "positional",
    inspect.Parameter.POSITIONAL_OR_KEYWORD: "positional",
    inspect.Parameter.VAR_POSITIONAL: "var_positional",
    inspect.Parameter.KEYWORD_ONLY: "keyword",
    inspect.Parameter.VAR_KEYWORD: "var_keyword",
}


# ==============================================================================
# Docstrings
# ==============================================================================


def _paragraphs(lines: list[str]) -> str:
    """Join wrapped lines into paragraphs separated by newlines."""
    paragraphs: list[str] = []
    current: list[str] = []
    for line in lines + [""]:
        if line.strip():
            current.append(line.strip())
        elif current:
            paragraphs.append(" ".join(current))
            current = []
    return "\n".join(paragraphs)


def _parse_args(lines: list[str]) -> dict[str, str]:
    entries: dict[str, list[str]] = {}
    name = None
    for line in textwrap.dedent("\n".join(lines)).splitlines():
        if not line.strip():
            continue
        match = None if line.startswith(" ") else _ARG_ENTRY.match(line)
        if match:
            name = match.group(1).lstrip("*")
            entries[name] = [match.group(2)]
        elif name is not None:
            entries[name].append(line.strip())
    return {key: " ".join(part for part in parts if part) for key, parts in entries.items()}


def parse_docstring(doc: str | None) -> dict[str, Any]:
    """Split a Google-style docstring into its parts.

    Args:
        doc: The raw docstring (None is accepted).

    Returns:
        A dict with ``description`` (str), ``args`` (name to description),
        ``returns`` (str) and ``example`` (str, dedented).

    Example:
        >>> parse_docstring('''Say hi.
        ...
        ... Args:
        ...     name: Who to greet.
        ... ''')["args"]
        {'name': 'Who to greet.'}
    """
    sections: dict[str, list[str]] = {"description": []}
    current = "description"
    for line in inspect.cleandoc(doc or "").splitlines():
        if match := _SECTION.match(line):
            current = match.group(1).lower()
            sections.setdefault(current, [])
            continue
        sections[current].append(line)

    example = sections.get("example") or sections.get("examples") or []
    return {
        "description": _paragraphs(sections["description"]),
        "args": _parse_args(sections.get("args") or sections.get("arguments") or []),
        "returns": _paragraphs(
            textwrap.dedent("\n".join(sections.get("returns", []))).splitlines()
        ),
        "example": textwrap.dedent("\n".join(example)).strip("\n"),
    }


# ==============================================================================
# Entries
# ==============================================================================


def _annotation(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "Any"
    if isinstance(annotation, str):
        return annotation
    return inspect.formatannotation(annotation)


def _syntax(name: str, signature: inspect.Signature) -> str:
    """Render ``name(...)`` with annotations unquoted (modules postpone them)."""
    rendered: list[str] = []
    bare_star = False
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            text, bare_star = f"*{param.name}", True
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            text = f"**{param.name}"
        else:
            if param.kind is inspect.Parameter.KEYWORD_ONLY and not bare_star:
                rendered.append("*")
                bare_star = True
            text = param.name
        annotated = param.annotation is not inspect.Parameter.empty
        if annotated:
            text += f": {_annotation(param.annotation)}"
        if param.default is not inspect.Parameter.empty:
            text += f" = {param.default!r}" if annotated else f"={param.default!r}"
        rendered.append(text)
    syntax = f"{name}({', '.join(rendered)})"
    if signature.return_annotation is not inspect.Signature.empty:
        syntax += f" -> {_annotation(signature.return_annotation)}"
    return syntax


def _source_file(module: ModuleType) -> str:
    return module.__name__.replace(".", "/") + ".py"


def _category(module: ModuleType) -> str:
    package, _, name = module.__name__.rpartition(".")
    return "utils" if package.endswith(".utils") else name


def describe_function(name: str, func: Any, module: ModuleType) -> DocFunction:
    """Describe ``func``, exported from ``module`` as ``name``."""
    parsed = parse_docstring(inspect.getdoc(func))
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        signature = None

    params: list[DocParam] = []
    returns = None
    if signature is not None:
        for param in signature.parameters.values():
            optional = param.default is not inspect.Parameter.empty or param.kind in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD,
            )
            params.append(
                DocParam(
                    name=param.name,
                    type=_annotation(param.annotation),
                    description=parsed["args"].get(param.name, ""),
                    optional=optional,
                    default_value=(
                        None
                        if param.default is inspect.Parameter.empty
                        else repr(param.default)
                    ),
                    kind=_PARAM_KINDS[param.kind],
                )
            )
        if signature.return_annotation is not inspect.Signature.empty or parsed["returns"]:
            returns = DocReturn(
                type=_annotation(signature.return_annotation),
                description=parsed["returns"],
            )

    return DocFunction(
        name=name,
        category=_category(module),
        description=parsed["description"],
        syntax=_syntax(name, signature) if signature is not None else f"{name}(...)",
        params=tuple(params),
        returns=returns,
        example=parsed["example"],
        source_file=_source_file(module),
    )


def _preview(value: Any) -> Any:
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, dict) or hasattr(value, "items"):
        return {key: _preview(item) for key, item in value.items()}
    return value


def describe_constant(name: str, value: Any) -> DocConstant:
    """Describe the mapping constant ``name`` of :mod:`generic_functions.constants`."""
    items = list(value.values())
    value_types = sorted({type(item).__name__ for item in items}) or ["Any"]
    value_type = value_types[0] if len(value_types) == 1 else " | ".join(value_types)
    if value_type == "Pattern":
        value_type = "re.Pattern[str]"
    return DocConstant(
        name=name,
        category="constants",
        description=constants_module.DESCRIPTIONS.get(name, ""),
        type=f"Mapping[str, {value_type}]",
        value=repr(_preview(value)),
        source_file=_source_file(constants_module),
    )


def _package_info() -> PackageInfo:
    try:
        meta = metadata.metadata(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        logger.debug("Distribution %s is not installed; using bare package info", DISTRIBUTION_NAME)
        return PackageInfo(name=DISTRIBUTION_NAME, version=generic_functions.__version__)
    urls = meta.get_all("Project-URL") or []
    homepage = meta.get("Home-page") or next(
        (url.split(",", 1)[1].strip() for url in urls if url.lower().startswith("homepage")),
        "",
    )
    return PackageInfo(
        name=meta["Name"],
        version=meta["Version"],
        description=meta.get("Summary") or "",
        license=meta.get("License") or meta.get("License-Expression") or "",
        homepage=homepage,
        keywords=tuple(
            keyword.strip()
            for keyword in (meta.get("Keywords") or "").split(",")
            if keyword.strip()
        ),
    )


def _public_functions(module: ModuleType) -> list[tuple[str, Any]]:
    return [
        (name, member)
        for name in getattr(module, "__all__", ())
        if inspect.isfunction(member := getattr(module, name))
    ]


@functools.cache
def build_catalog() -> Catalog:
    """Build the catalog of every public function and constant.

    The result is computed once per process.

    Returns:
        The catalog, with functions in module order and, within a module, in
        ``__all__`` order.
    """
    module_names = [f"generic_functions.core.{name}" for name in CORE_MODULES] + [
        f"generic_functions.utils.{name}" for name in UTILS_MODULES
    ]
    functions: list[DocFunction] = []
    for module_name in module_names:
        module = importlib.import_module(module_name)
        entries = [
            describe_function(name, func, module)
            for name, func in _public_functions(module)
        ]
        logger.debug("Introspected %d function(s) from %s", len(entries), module_name)
        functions.extend(entries)

    constants = [
        describe_constant(name, getattr(constants_module, name))
        for name in constants_module.__all__
    ]
    catalog = Catalog(
        functions=tuple(functions),
        constants=tuple(constants),
        package_info=_package_info(),
    )
    logger.debug(
        "Built catalog: %d function(s), %d constant(s)",
        len(catalog.functions),
        len(catalog.constants),
    )
    return catalog
