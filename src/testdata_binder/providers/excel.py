"""Workbook data provider: one sheet per bound type, one record per row below the header."""

import logging
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook

from testdata_binder.core.records import instantiate, row_to_record
from testdata_binder.errors import DataSourceError
from testdata_binder.providers.base import BaseDataProvider, BoundRecord

logger = logging.getLogger(__name__)


class ExcelDataProvider(BaseDataProvider):
    @contextmanager
    def _open(self) -> Iterator[Workbook]:
        path = self.resource.get_path()
        try:
            workbook = load_workbook(path, read_only=True, data_only=True)
        except FileNotFoundError as exc:
            raise DataSourceError(f"File not found: {path}") from exc
        except (InvalidFileException, zipfile.BadZipFile) as exc:
            raise DataSourceError(f"Malformed workbook {path}: {exc}") from exc
        logger.info("Loaded workbook %s", path)
        try:
            yield workbook
        finally:
            workbook.close()

    def _read_sheet(self, workbook: Workbook, sheet_name: str) -> list[dict[str, Any]]:
        if sheet_name not in workbook.sheetnames:
            raise DataSourceError(
                f"Sheet '{sheet_name}' not found in {self.resource.get_path()}; available: {workbook.sheetnames}"
            )
        header_row = self.settings.sheet_header_row
        rows = workbook[sheet_name].iter_rows(min_row=header_row, values_only=True)
        header = next(rows, None)
        if header is None:
            raise DataSourceError(f"Sheet '{sheet_name}' has no header row {header_row}")
        headers = [str(cell).strip() if cell is not None and str(cell).strip() else None for cell in header]

        records: list[dict[str, Any]] = []
        for values in rows:
            if all(value is None for value in values):
                break
            records.append(row_to_record(headers, values))
        logger.debug("Sheet %s has %d record(s)", sheet_name, len(records))
        return records

    def _bind_sheet(self, workbook: Workbook, sheet_name: str, target_type: type) -> list[BoundRecord]:
        path = self.resource.get_path()
        return [
            (record, instantiate(target_type, record, f"row {position + 1} of sheet '{sheet_name}' in {path}"))
            for position, record in enumerate(self._read_sheet(workbook, sheet_name))
        ]

    def _load_bound_records(self, declared_type: type) -> list[BoundRecord]:
        with self._open() as workbook:
            return self._bind_sheet(workbook, declared_type.__name__, declared_type)

    def get_all_data(self) -> list[tuple[Any, ...]]:
        """Return the rows of this resource.

        A single-type resource reads the sheet named after the declared type
        and yields one 1-tuple per row. A multi-type resource treats every
        selector as a sheet name and yields one row holding the list of
        instances read from each sheet.
        """
        self._require_bound()
        declared_type = self.resource.get_declared_type()
        if declared_type is not None:
            rows = [(instance,) for _, instance in self._load_bound_records(declared_type)]
            logger.info("Bound %d row(s) of %s from %s", len(rows), declared_type.__name__, self.resource.get_path())
            return rows

        binding_map = self.resource.get_binding_map()
        assert binding_map is not None
        with self._open() as workbook:
            return [
                tuple(
                    [instance for _, instance in self._bind_sheet(workbook, sheet_name, target_type)]
                    for sheet_name, target_type in binding_map.items()
                )
            ]

    def get_single_row(self, key: Any) -> Any:
        """Return the instance whose first-column value equals *key*."""
        return self.get_data_by_keys([key])[0][0]

    def get_records(self, sheet_name: str) -> list[dict[str, Any]]:
        """Return the unbound row records of *sheet_name*."""
        with self._open() as workbook:
            return self._read_sheet(workbook, sheet_name)
