"""Unit tests for TypedBindingMap."""

import pytest

from testdata_binder import BindingNotFoundError, InvalidArgumentError, TypedBindingMap


class Header:
    pass


class Items:
    pass


class Footer:
    pass


def test_get_bindings_returns_all_pairs() -> None:
    binding_map = TypedBindingMap({"//order[1]": Header, "//order[1]/items": Items})
    assert binding_map.get_bindings() == {"//order[1]": Header, "//order[1]/items": Items}
    assert len(binding_map) == 2


def test_empty_map_reports_absent() -> None:
    assert TypedBindingMap().get_bindings() is None
    assert TypedBindingMap({}).get_bindings() is None
    assert TypedBindingMap([]).get_bindings() is None


def test_reinserting_selector_overwrites_without_growing() -> None:
    binding_map = TypedBindingMap([("//order", Header), ("//items", Items), ("//order", Footer)])
    assert len(binding_map) == 2
    assert binding_map.lookup("//order") is Footer


def test_builder_last_write_wins() -> None:
    binding_map = TypedBindingMap.builder().bind("//order", Header).bind("//order", Items).build()
    assert binding_map.get_bindings() == {"//order": Items}


def test_builder_cannot_be_reused_after_build() -> None:
    builder = TypedBindingMap.builder().bind("//order", Header)
    builder.build()
    with pytest.raises(InvalidArgumentError):
        builder.bind("//items", Items)


def test_lookup_exact_match_only() -> None:
    binding_map = TypedBindingMap({"//order[1]": Header})
    assert binding_map.lookup("//order[1]") is Header
    with pytest.raises(BindingNotFoundError) as exc_info:
        binding_map.lookup("//order")
    assert exc_info.value.selector == "//order"
    assert "//order" in str(exc_info.value)


def test_lookup_not_found_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        TypedBindingMap({"//a": Header}).lookup("//b")


@pytest.mark.parametrize("selector", [None, ""])
def test_lookup_rejects_missing_selector(selector: str | None) -> None:
    with pytest.raises(InvalidArgumentError):
        TypedBindingMap({"//a": Header}).lookup(selector)  # type: ignore[arg-type]


@pytest.mark.parametrize("selector", [None, ""])
def test_rejects_missing_selector_at_insert(selector: str | None) -> None:
    with pytest.raises(InvalidArgumentError):
        TypedBindingMap({selector: Header})  # type: ignore[dict-item]
    with pytest.raises(InvalidArgumentError):
        TypedBindingMap.builder().bind(selector, Header)  # type: ignore[arg-type]


def test_rejects_non_class_target() -> None:
    with pytest.raises(InvalidArgumentError):
        TypedBindingMap({"//a": "Header"})  # type: ignore[dict-item]


def test_selector_syntax_is_not_validated() -> None:
    binding_map = TypedBindingMap({"not [a valid xpath": Header, "Sheet1": Items})
    assert "not [a valid xpath" in binding_map
    assert "Sheet1" in binding_map


def test_equality_ignores_insertion_order() -> None:
    first = TypedBindingMap({"//a": Header, "//b": Items})
    second = TypedBindingMap({"//b": Items, "//a": Header})
    assert first == second
    assert hash(first) == hash(second)
    assert sorted(first) == ["//a", "//b"]


def test_map_is_immutable() -> None:
    binding_map = TypedBindingMap({"//a": Header})
    with pytest.raises(AttributeError):
        binding_map._bindings = {}  # type: ignore[misc]


def test_source_mapping_changes_do_not_leak() -> None:
    source = {"//a": Header}
    binding_map = TypedBindingMap(source)
    source["//b"] = Items
    assert binding_map.get_bindings() == {"//a": Header}
