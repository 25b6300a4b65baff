import logging
import os

from pydantic import BaseModel, ConfigDict

from testdata_binder.errors import InvalidArgumentError


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "WARNING"
    sheet_header_row: int = 1


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidArgumentError(f"Unknown log level '{raw}'.")
    return level


def _parse_header_row(raw: str) -> int:
    try:
        row = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"Sheet header row must be an integer, got '{raw}'.") from None
    if row < 1:
        raise InvalidArgumentError(f"Sheet header row is 1-based, got {row}.")
    return row


def get_settings() -> Settings:
    return Settings(
        log_level=_parse_log_level(os.getenv("TESTDATA_BINDER_LOG_LEVEL", "WARNING")),
        sheet_header_row=_parse_header_row(os.getenv("TESTDATA_BINDER_SHEET_HEADER_ROW", "1")),
    )
