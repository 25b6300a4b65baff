from testdata_binder.core.bindings import TypedBindingMap, TypedBindingMapBuilder
from testdata_binder.core.helpers import parse_indexes
from testdata_binder.core.resource import FileResource, MultiType, SingleType
from testdata_binder.errors import (
    BindingNotFoundError,
    DataSourceError,
    InvalidArgumentError,
    TestDataError,
)
from testdata_binder.providers import ExcelDataProvider, XmlDataProvider, get_data_provider

__all__ = [
    "BindingNotFoundError",
    "DataSourceError",
    "ExcelDataProvider",
    "FileResource",
    "InvalidArgumentError",
    "MultiType",
    "SingleType",
    "TestDataError",
    "TypedBindingMap",
    "TypedBindingMapBuilder",
    "XmlDataProvider",
    "get_data_provider",
    "parse_indexes",
]
