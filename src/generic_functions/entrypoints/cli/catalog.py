"""Catalog commands: browse the library's functions and constants.

Tables go to **stdout**; notices (no match, unknown name) go to **stderr**.

Examples
    $ generic-functions list --category string
    $ generic-functions search camel
    $ generic-functions show chunk
    $ generic-functions constants
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from generic_functions.catalog import (
    DocConstant,
    DocFunction,
    build_catalog,
    filter_by_search,
    find_entry,
    format_category_name,
    group_by_category,
    sort_by_name,
)
from generic_functions.errors import CatalogEntryNotFoundError

from .helpers import warn

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY_MSG = "Unknown category {category!r}. Available: {available}."
NO_MATCH_MSG = "Nothing matches {term!r}."


def _console(ctx: click.Context) -> Console:
    """Stdout console honouring ``--color/--no-color``."""
    return Console(color_system=None if ctx.color is False else "auto", soft_wrap=False)


def _functions_table(functions: list[DocFunction], title: str | None = None) -> Table:
    table = Table(title=title, title_justify="left", show_lines=False)
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Category", style="magenta", no_wrap=True)
    table.add_column("Summary")
    for function in functions:
        table.add_row(function.name, function.category, escape(function.summary))
    return table


def _constants_table(constants: list[DocConstant]) -> Table:
    table = Table(title="Constants", title_justify="left")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("Description")
    for constant in constants:
        table.add_row(constant.name, escape(constant.type), escape(constant.summary))
    return table


@click.command("list")
@click.option(
    "--category",
    "-c",
    help="Only list functions of this category (e.g. array, string, utils).",
)
@click.pass_context
def list_functions(ctx: click.Context, category: str | None) -> None:
    """List the library's functions, grouped by category."""
    groups = group_by_category(build_catalog().functions)
    if category is not None:
        if category not in groups:
            raise click.ClickException(
                UNKNOWN_CATEGORY_MSG.format(
                    category=category, available=", ".join(sorted(groups))
                )
            )
        groups = {category: groups[category]}

    console = _console(ctx)
    for name, functions in groups.items():
        console.print(_functions_table(sort_by_name(functions), format_category_name(name)))
    logger.debug("Listed %d category group(s)", len(groups))


@click.command("search")
@click.argument("term")
@click.pass_context
def search(ctx: click.Context, term: str) -> None:
    """Search functions whose name or description contains TERM."""
    matches = sort_by_name(filter_by_search(build_catalog().functions, term))
    if not matches:
        warn(NO_MATCH_MSG.format(term=term))
        return
    _console(ctx).print(_functions_table(matches, f"Functions matching {term!r}"))


@click.command("constants")
@click.pass_context
def constants(ctx: click.Context) -> None:
    """List the library's constants."""
    _console(ctx).print(_constants_table(list(build_catalog().constants)))


def _print_function(console: Console, function: DocFunction) -> None:
    console.print(f"[bold cyan]{escape(function.syntax)}[/]")
    console.print(f"[dim]{function.category} - {function.source_file}[/]")
    if function.description:
        console.print()
        console.print(escape(function.description))
    if function.params:
        table = Table(title="Parameters", title_justify="left")
        table.add_column("Name", style="bold", no_wrap=True)
        table.add_column("Type", style="green")
        table.add_column("Default")
        table.add_column("Description")
        for param in function.params:
            table.add_row(
                param.name,
                escape(param.type),
                escape(param.default_value or ("" if param.optional else "required")),
                escape(param.description),
            )
        console.print()
        console.print(table)
    if function.returns is not None:
        console.print()
        console.print(f"[bold]Returns[/] [green]{escape(function.returns.type)}[/]")
        if function.returns.description:
            console.print(escape(function.returns.description))
    if function.example:
        console.print()
        console.print("[bold]Example[/]")
        console.print(Syntax(function.example, "pycon", theme="ansi_dark"))


def _print_constant(console: Console, constant: DocConstant) -> None:
    console.print(f"[bold cyan]{constant.name}[/]: [green]{escape(constant.type)}[/]")
    console.print(escape(constant.description))
    console.print()
    console.print(escape(constant.value))


@click.command("show")
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Show the signature, parameters, return value and example of NAME."""
    try:
        entry = find_entry(build_catalog(), name)
    except CatalogEntryNotFoundError as e:
        raise click.ClickException(str(e)) from e

    console = _console(ctx)
    if isinstance(entry, DocFunction):
        _print_function(console, entry)
    else:
        _print_constant(console, entry)
