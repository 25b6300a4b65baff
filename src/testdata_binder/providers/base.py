import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from testdata_binder.config import Settings, get_settings
from testdata_binder.core.helpers import parse_indexes
from testdata_binder.core.resource import FileResource
from testdata_binder.errors import DataSourceError, InvalidArgumentError

logger = logging.getLogger(__name__)

# A parsed record paired with the instance bound from it.
BoundRecord = tuple[Any, Any]


def _key_of(record: Any, key_field: str | None) -> Any:
    if not isinstance(record, dict):
        return record
    if key_field is not None:
        if key_field not in record:
            raise DataSourceError(f"Key field '{key_field}' not present in record {sorted(record)}")
        return record[key_field]
    if not record:
        return None
    return next(iter(record.values()))


class BaseDataProvider(ABC):
    """Row selection shared by the XML and workbook providers.

    Subclasses load the single-type records of their file through
    ``_load_bound_records``; multi-type reads are provider specific.
    """

    def __init__(self, resource: FileResource, settings: Settings | None = None) -> None:
        if not isinstance(resource, FileResource):
            raise InvalidArgumentError(f"Expected a FileResource, got {type(resource).__name__}.")
        self.resource = resource
        self.settings = settings or get_settings()

    def _require_single_type(self) -> type:
        declared_type = self.resource.get_declared_type()
        if declared_type is None:
            raise InvalidArgumentError(
                f"Resource {self.resource.get_path()} has no declared type; row selection needs a single-type resource."
            )
        return declared_type

    def _require_bound(self) -> None:
        if not self.resource.is_bound:
            raise InvalidArgumentError(f"Resource {self.resource.get_path()} has neither a declared type nor bindings.")

    @abstractmethod
    def _load_bound_records(self, declared_type: type) -> list[BoundRecord]: ...

    @abstractmethod
    def get_all_data(self) -> list[tuple[Any, ...]]: ...

    def get_data_by_indexes(self, indexes: str) -> list[tuple[Any, ...]]:
        """Return the single-type rows at the 1-based positions in *indexes* (e.g. ``"1, 3-5"``)."""
        declared_type = self._require_single_type()
        wanted = parse_indexes(indexes)
        records = self._load_bound_records(declared_type)
        rows: list[tuple[Any, ...]] = []
        for index in wanted:
            if index > len(records):
                raise DataSourceError(
                    f"Index {index} out of range for {self.resource.get_path()} ({len(records)} records)"
                )
            rows.append((records[index - 1][1],))
        logger.info("Selected %d of %d records from %s", len(rows), len(records), self.resource.get_path())
        return rows

    def get_data_by_keys(self, keys: Sequence[Any], key_field: str | None = None) -> list[tuple[Any, ...]]:
        """Return the single-type rows whose key field matches one of *keys*, in the order of *keys*.

        The key field defaults to the first field of each record. Keys are
        compared as strings so that numeric workbook cells match textual keys.
        """
        declared_type = self._require_single_type()
        if isinstance(keys, str) or not keys:
            raise InvalidArgumentError("Keys must be a non-empty sequence.")
        by_key: dict[str, Any] = {}
        for record, instance in self._load_bound_records(declared_type):
            by_key.setdefault(str(_key_of(record, key_field)), instance)

        rows: list[tuple[Any, ...]] = []
        for key in keys:
            try:
                rows.append((by_key[str(key)],))
            except KeyError:
                raise DataSourceError(f"No record with key '{key}' in {self.resource.get_path()}") from None
        return rows
