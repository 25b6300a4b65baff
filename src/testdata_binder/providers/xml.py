"""XML data provider: binds root-level records or XPath matches to their target types."""

import logging
from typing import Any

from lxml import etree

from testdata_binder.core.records import element_to_record, instantiate
from testdata_binder.errors import DataSourceError, InvalidArgumentError
from testdata_binder.providers.base import BaseDataProvider, BoundRecord

logger = logging.getLogger(__name__)


def _result_to_record(item: Any) -> Any:
    if isinstance(item, etree._Element):
        return element_to_record(item)
    if isinstance(item, str):
        return str(item)
    return item


class XmlDataProvider(BaseDataProvider):
    def _parse(self) -> etree._ElementTree:
        path = self.resource.get_path()
        try:
            tree = etree.parse(path)
        except etree.XMLSyntaxError as exc:
            raise DataSourceError(f"Malformed XML in {path}: {exc}") from exc
        except OSError as exc:
            raise DataSourceError(f"File not found: {path}") from exc
        logger.info("Loaded XML document %s", path)
        return tree

    def _evaluate(self, tree: etree._ElementTree, selector: str) -> list[Any]:
        try:
            result = tree.xpath(selector)
        except etree.XPathError as exc:
            raise DataSourceError(f"Invalid XPath '{selector}': {exc}") from exc
        matches = result if isinstance(result, list) else [result]
        logger.debug("XPath %s matched %d node(s)", selector, len(matches))
        if not matches:
            raise DataSourceError(f"XPath '{selector}' matched nothing in {self.resource.get_path()}")
        return matches

    def _bind_selector(self, tree: etree._ElementTree, selector: str, target_type: type) -> list[Any]:
        origin = f"'{selector}' in {self.resource.get_path()}"
        return [instantiate(target_type, _result_to_record(item), origin) for item in self._evaluate(tree, selector)]

    def _load_bound_records(self, declared_type: type) -> list[BoundRecord]:
        root = self._parse().getroot()
        path = self.resource.get_path()
        bound: list[BoundRecord] = []
        for position, element in enumerate(child for child in root if isinstance(child.tag, str)):
            record = element_to_record(element)
            bound.append((record, instantiate(declared_type, record, f"record {position + 1} of {path}")))
        return bound

    def get_all_data(self) -> list[tuple[Any, ...]]:
        """Return the rows of this resource.

        A single-type resource yields one 1-tuple per child of the document
        root. A multi-type resource yields one row holding, for each selector
        in binding order, the list of instances its XPath matched.
        """
        self._require_bound()
        declared_type = self.resource.get_declared_type()
        if declared_type is not None:
            rows = [(instance,) for _, instance in self._load_bound_records(declared_type)]
            logger.info("Bound %d record(s) of %s from %s", len(rows), declared_type.__name__, self.resource.get_path())
            return rows

        binding_map = self.resource.get_binding_map()
        assert binding_map is not None
        tree = self._parse()
        return [
            tuple(self._bind_selector(tree, selector, target_type) for selector, target_type in binding_map.items())
        ]

    def get_data_by_selector(self, selector: str) -> list[Any]:
        """Return the instances bound from one registered selector."""
        self._require_bound()
        binding_map = self.resource.get_binding_map()
        if binding_map is None:
            raise InvalidArgumentError(f"Resource {self.resource.get_path()} has no selector bindings.")
        target_type = binding_map.lookup(selector)
        return self._bind_selector(self._parse(), selector, target_type)

    def get_records(self, selector: str | None = None) -> list[Any]:
        """Return unbound records: the root's children, or the matches of *selector*."""
        tree = self._parse()
        if selector is None:
            return [element_to_record(child) for child in tree.getroot() if isinstance(child.tag, str)]
        return [_result_to_record(item) for item in self._evaluate(tree, selector)]
