import logging
from typing import Annotated

import typer

from testdata_binder.cli.preview import _fail, excel, xml
from testdata_binder.config import _parse_log_level, get_settings
from testdata_binder.errors import InvalidArgumentError

app = typer.Typer(
    name="testdata-binder",
    help="testdata-binder CLI — inspect the records an XML or workbook test-data file provides.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("xml")(xml)
app.command("excel")(excel)


@app.callback()
def configure(
    log_level: Annotated[
        str | None, typer.Option(help="Logging level (defaults to TESTDATA_BINDER_LOG_LEVEL).")
    ] = None,
) -> None:
    try:
        level = _parse_log_level(log_level) if log_level else get_settings().log_level
    except InvalidArgumentError as exc:
        _fail(exc)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    app()
