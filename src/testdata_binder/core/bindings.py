"""Selector to target-type bindings for documents that yield several typed objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from testdata_binder.core.helpers import require_selector, require_type
from testdata_binder.errors import BindingNotFoundError, InvalidArgumentError


class TypedBindingMap:
    """Immutable mapping from a location selector to the type its content binds to.

    Selectors are XPath expressions for XML documents and sheet names for
    workbooks. Their syntax is not checked here; the provider evaluating them
    reports malformed selectors. Re-binding a selector replaces the earlier
    target type.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[str, type] | Iterable[tuple[str, type]] | None = None) -> None:
        pairs = bindings.items() if isinstance(bindings, Mapping) else (bindings or ())
        resolved: dict[str, type] = {}
        for selector, target_type in pairs:
            resolved[require_selector(selector)] = require_type(target_type, "Target type")
        object.__setattr__(self, "_bindings", resolved)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def builder(cls) -> TypedBindingMapBuilder:
        return TypedBindingMapBuilder()

    def get_bindings(self) -> dict[str, type] | None:
        """Return a copy of the bindings, or ``None`` when there are none."""
        if not self._bindings:
            return None
        return dict(self._bindings)

    def lookup(self, selector: str) -> type:
        require_selector(selector)
        try:
            return self._bindings[selector]
        except KeyError:
            raise BindingNotFoundError(selector) from None

    def selectors(self) -> list[str]:
        return list(self._bindings)

    def items(self) -> list[tuple[str, type]]:
        return list(self._bindings.items())

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __contains__(self, selector: object) -> bool:
        return selector in self._bindings

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedBindingMap):
            return self._bindings == other._bindings
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._bindings.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{s!r}: {t.__name__}" for s, t in self._bindings.items())
        return f"TypedBindingMap({{{inner}}})"


class TypedBindingMapBuilder:
    """Collects bindings one at a time before freezing them into a ``TypedBindingMap``."""

    def __init__(self) -> None:
        self._pairs: dict[str, type] = {}
        self._built = False

    def bind(self, selector: str, target_type: type) -> TypedBindingMapBuilder:
        if self._built:
            raise InvalidArgumentError("Builder already produced its TypedBindingMap.")
        self._pairs[require_selector(selector)] = require_type(target_type, "Target type")
        return self

    def build(self) -> TypedBindingMap:
        self._built = True
        return TypedBindingMap(self._pairs)
