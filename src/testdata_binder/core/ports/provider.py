from collections.abc import Sequence
from typing import Any, Protocol

from testdata_binder.core.resource import FileResource


class DataProvider(Protocol):
    resource: FileResource

    def get_all_data(self) -> list[tuple[Any, ...]]: ...

    def get_data_by_indexes(self, indexes: str) -> list[tuple[Any, ...]]: ...

    def get_data_by_keys(self, keys: Sequence[Any], key_field: str | None = None) -> list[tuple[Any, ...]]: ...
