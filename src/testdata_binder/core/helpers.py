import os
import re
from typing import Any

from testdata_binder.errors import InvalidArgumentError

_INDEX_TOKEN = re.compile(r"^(\d+)(?:\s*-\s*(\d+))?$")


def require_file_name(file_name: Any) -> str:
    if file_name is None or not isinstance(file_name, str) or not file_name.strip():
        raise InvalidArgumentError("File name must be a non-empty string.")
    return file_name


def require_selector(selector: Any) -> str:
    if selector is None or not isinstance(selector, str) or not selector:
        raise InvalidArgumentError(f"Selector must be a non-empty string, got {selector!r}.")
    return selector


def require_type(target_type: Any, what: str = "Declared type") -> type:
    if not isinstance(target_type, type):
        raise InvalidArgumentError(f"{what} must be a class, got {target_type!r}.")
    return target_type


def join_path(directory: str | None, file_name: str) -> str:
    """Join *directory* and *file_name* with the host path rules; no directory means verbatim."""
    if not directory:
        return file_name
    return os.path.join(directory, file_name)


def parse_indexes(indexes: str) -> list[int]:
    """Parse a 1-based index expression such as ``"1, 3-5"`` into ``[1, 3, 4, 5]``."""
    if indexes is None or not str(indexes).strip():
        raise InvalidArgumentError("Index expression must not be empty.")

    result: list[int] = []
    seen: set[int] = set()
    for token in str(indexes).split(","):
        match = _INDEX_TOKEN.match(token.strip())
        if match is None:
            raise InvalidArgumentError(f"Malformed index token '{token.strip()}' in '{indexes}'.")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        if start < 1:
            raise InvalidArgumentError(f"Indexes are 1-based, got {start} in '{indexes}'.")
        if end < start:
            raise InvalidArgumentError(f"Reversed range '{token.strip()}' in '{indexes}'.")
        for value in range(start, end + 1):
            if value not in seen:
                seen.add(value)
                result.append(value)
    return result
