from typing import Any

from lxml import etree
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from testdata_binder.errors import DataSourceError


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def element_to_record(element: etree._Element) -> Any:
    """Convert an XML element into plain Python data.

    Attributes and child elements become dict fields; repeated child tags are
    collected into a list. A leaf element without attributes converts to its
    stripped text.
    """
    children = [child for child in element if isinstance(child.tag, str)]
    if not children and not element.attrib:
        return (element.text or "").strip()

    record: dict[str, Any] = {_local_name(key): value for key, value in element.attrib.items()}
    for child in children:
        name = _local_name(child.tag)
        value = element_to_record(child)
        if name in record:
            existing = record[name]
            if isinstance(existing, list):
                existing.append(value)
            else:
                record[name] = [existing, value]
        else:
            record[name] = value
    if not children and (element.text or "").strip():
        record["text"] = element.text.strip()
    return record


def row_to_record(headers: list[str | None], values: tuple[Any, ...]) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for header, value in zip(headers, values, strict=False):
        if header is None:
            continue
        record[header] = value
    return record


def instantiate(target_type: type, record: Any, origin: str) -> Any:
    """Build an instance of *target_type* from *record*; *origin* names the source in error messages."""
    try:
        return TypeAdapter(target_type).validate_python(record)
    except (ValidationError, PydanticSchemaGenerationError) as exc:
        raise DataSourceError(f"Cannot bind {origin} to {target_type.__name__}: {exc}") from exc
