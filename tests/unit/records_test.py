"""Unit tests for record conversion and type instantiation."""

from dataclasses import dataclass

import pytest
from lxml import etree
from pydantic import BaseModel

from testdata_binder.core.records import element_to_record, instantiate, row_to_record
from testdata_binder.errors import DataSourceError


class Order(BaseModel):
    id: str
    amount: float


@dataclass
class Item:
    sku: str
    quantity: int


def test_leaf_element_converts_to_text() -> None:
    assert element_to_record(etree.fromstring("<id> A-1 </id>")) == "A-1"


def test_children_and_attributes_become_fields() -> None:
    element = etree.fromstring('<order currency="EUR"><id>A-1</id><amount>2.5</amount></order>')
    assert element_to_record(element) == {"currency": "EUR", "id": "A-1", "amount": "2.5"}


def test_repeated_children_become_list() -> None:
    element = etree.fromstring('<items><item sku="a"/><item sku="b"/><item sku="c"/></items>')
    assert element_to_record(element) == {"item": [{"sku": "a"}, {"sku": "b"}, {"sku": "c"}]}


def test_attribute_element_keeps_text() -> None:
    element = etree.fromstring('<note lang="en">hello</note>')
    assert element_to_record(element) == {"lang": "en", "text": "hello"}


def test_namespaces_and_comments_are_ignored() -> None:
    element = etree.fromstring('<o:order xmlns:o="urn:x"><!-- c --><o:id>1</o:id></o:order>')
    assert element_to_record(element) == {"id": "1"}


def test_row_to_record_skips_blank_headers() -> None:
    assert row_to_record(["name", None, "age"], ("alice", "ignored", 30)) == {"name": "alice", "age": 30}


def test_row_to_record_tolerates_short_rows() -> None:
    assert row_to_record(["name", "age"], ("alice",)) == {"name": "alice"}


def test_instantiate_pydantic_model() -> None:
    order = instantiate(Order, {"id": "A-1", "amount": "2.5"}, "test")
    assert order == Order(id="A-1", amount=2.5)


def test_instantiate_dataclass() -> None:
    assert instantiate(Item, {"sku": "pen", "quantity": "2"}, "test") == Item(sku="pen", quantity=2)


def test_instantiate_scalar() -> None:
    assert instantiate(int, "42", "test") == 42


def test_instantiate_failure_names_origin() -> None:
    with pytest.raises(DataSourceError, match="record 3 of orders.xml") as exc_info:
        instantiate(Order, {"id": "A-1", "amount": "lots"}, "record 3 of orders.xml")
    assert exc_info.value.__cause__ is not None


class PlainOrder:
    def __init__(self, id: str) -> None:
        self.id = id


def test_instantiate_unsupported_class_is_a_data_source_error() -> None:
    with pytest.raises(DataSourceError, match="Cannot bind record 1 of orders.xml to PlainOrder"):
        instantiate(PlainOrder, {"id": "A-1"}, "record 1 of orders.xml")
