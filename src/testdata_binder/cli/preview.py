from collections.abc import Sequence
from typing import Annotated, Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from testdata_binder.core.resource import FileResource
from testdata_binder.errors import TestDataError
from testdata_binder.providers.excel import ExcelDataProvider
from testdata_binder.providers.xml import XmlDataProvider

console = Console()
err_console = Console(stderr=True)


def _render_records(title: str, records: Sequence[Any]) -> None:
    headers: list[str] = []
    for record in records:
        if isinstance(record, dict):
            headers.extend(key for key in record if key not in headers)
    table = Table(title=escape(title), show_lines=False)
    if headers:
        for h in headers:
            table.add_column(h)
        for record in records:
            values = record if isinstance(record, dict) else {}
            table.add_row(*("" if values.get(h) is None else escape(str(values.get(h))) for h in headers))
    else:
        table.add_column("value")
        for record in records:
            table.add_row(escape(str(record)))
    console.print(table)
    console.print(f"({len(records)} records)")


def _fail(exc: TestDataError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def xml(
    path: Annotated[str, typer.Argument(help="Path to the XML file.")],
    selector: Annotated[
        list[str] | None, typer.Option("--selector", "-s", help="XPath to evaluate; repeat for several.")
    ] = None,
) -> None:
    """Show the records of an XML file, or the matches of each XPath selector."""
    try:
        provider = XmlDataProvider(FileResource.create(path))
        if not selector:
            _render_records(path, provider.get_records())
            return
        for expression in selector:
            _render_records(expression, provider.get_records(expression))
    except TestDataError as exc:
        _fail(exc)


def excel(
    path: Annotated[str, typer.Argument(help="Path to the .xlsx workbook.")],
    sheet: Annotated[str, typer.Option("--sheet", help="Sheet to read.")],
) -> None:
    """Show the row records of one workbook sheet."""
    try:
        provider = ExcelDataProvider(FileResource.create(path))
        _render_records(f"{path} (sheet {sheet})", provider.get_records(sheet))
    except TestDataError as exc:
        _fail(exc)
