import logging

from testdata_binder.config import Settings
from testdata_binder.core.ports.provider import DataProvider
from testdata_binder.core.resource import FileResource
from testdata_binder.errors import InvalidArgumentError
from testdata_binder.providers.excel import ExcelDataProvider
from testdata_binder.providers.xml import XmlDataProvider

logger = logging.getLogger(__name__)

_PROVIDERS_BY_SUFFIX: dict[str, type[XmlDataProvider] | type[ExcelDataProvider]] = {
    ".xml": XmlDataProvider,
    ".xlsx": ExcelDataProvider,
    ".xlsm": ExcelDataProvider,
}


def get_data_provider(resource: FileResource, settings: Settings | None = None) -> DataProvider:
    """Return the provider able to read *resource*, chosen by file extension."""
    provider_cls = _PROVIDERS_BY_SUFFIX.get(resource.suffix)
    if provider_cls is None:
        raise InvalidArgumentError(
            f"Unsupported file extension '{resource.suffix}' for {resource.get_path()}. "
            f"Supported: {sorted(_PROVIDERS_BY_SUFFIX)}"
        )
    logger.debug("Using %s for %s", provider_cls.__name__, resource.get_path())
    return provider_cls(resource, settings)


__all__ = [
    "ExcelDataProvider",
    "XmlDataProvider",
    "get_data_provider",
]
