"""File resources: which file a data provider reads and what its content binds to."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from testdata_binder.core.bindings import TypedBindingMap
from testdata_binder.core.helpers import join_path, require_file_name, require_type
from testdata_binder.errors import InvalidArgumentError

BindingsLike = TypedBindingMap | Mapping[str, type]


@dataclass(frozen=True)
class SingleType:
    """The whole file represents one type."""

    target_type: type

    def __post_init__(self) -> None:
        require_type(self.target_type)


@dataclass(frozen=True)
class MultiType:
    """Each selector of ``bindings`` yields its own type from the same file."""

    bindings: TypedBindingMap

    def __post_init__(self) -> None:
        if not isinstance(self.bindings, TypedBindingMap):
            raise InvalidArgumentError(f"MultiType expects a TypedBindingMap, got {type(self.bindings).__name__}.")


Binding = SingleType | MultiType


def _to_binding_map(bindings: BindingsLike) -> TypedBindingMap:
    if isinstance(bindings, TypedBindingMap):
        return bindings
    return TypedBindingMap(bindings)


def _to_binding(target: Any) -> Binding | None:
    if target is None:
        return None
    if isinstance(target, (TypedBindingMap, Mapping)):
        return MultiType(_to_binding_map(target))
    return SingleType(require_type(target))


@dataclass(frozen=True)
class FileResource:
    """Identifies a structured test-data file and the type(s) its content binds to.

    A resource is either single-typed (``SingleType``), multi-typed
    (``MultiType``) or not bound yet; it can never report a declared type and
    selector bindings at the same time.
    """

    file_name: str
    directory: str | None = None
    binding: Binding | None = None

    def __post_init__(self) -> None:
        require_file_name(self.file_name)
        if self.directory is not None and not isinstance(self.directory, str):
            raise InvalidArgumentError(f"Directory must be a string, got {self.directory!r}.")
        if self.binding is not None and not isinstance(self.binding, (SingleType, MultiType)):
            raise InvalidArgumentError(f"Unsupported binding {self.binding!r}.")

    @classmethod
    def create(cls, *args: Any) -> FileResource:
        """Build a resource from positional arguments.

        Accepted forms::

            create(full_path)
            create(full_path, declared_type | bindings)
            create(directory, file_name)
            create(directory, file_name, declared_type | bindings)

        ``bindings`` is a ``TypedBindingMap`` or a plain ``{selector: type}`` dict.
        """
        if len(args) == 1:
            return cls(file_name=_as_str(args[0]))
        if len(args) == 2:
            first, second = args
            if second is None:
                raise InvalidArgumentError(
                    "File name or target type must not be None; use create(full_path) for an unbound resource."
                )
            if isinstance(second, (str, Path)):
                return cls(file_name=_as_str(second), directory=_as_str(first))
            return cls(file_name=_as_str(first), binding=_to_binding(second))
        if len(args) == 3:
            directory, file_name, target = args
            return cls(file_name=_as_str(file_name), directory=_as_str(directory), binding=_to_binding(target))
        raise InvalidArgumentError(f"FileResource.create() takes 1 to 3 arguments, got {len(args)}.")

    @classmethod
    def single(cls, path: str, declared_type: type, directory: str | None = None) -> FileResource:
        return cls(file_name=path, directory=directory, binding=SingleType(require_type(declared_type)))

    @classmethod
    def multi(cls, path: str, bindings: BindingsLike, directory: str | None = None) -> FileResource:
        return cls(file_name=path, directory=directory, binding=MultiType(_to_binding_map(bindings)))

    def with_bindings(self, bindings: BindingsLike) -> FileResource:
        """Return a copy of this resource bound to ``bindings`` instead of its current binding."""
        return dataclasses.replace(self, binding=MultiType(_to_binding_map(bindings)))

    def get_path(self) -> str:
        return join_path(self.directory, self.file_name)

    def get_declared_type(self) -> type | None:
        if isinstance(self.binding, SingleType):
            return self.binding.target_type
        return None

    def get_binding_map(self) -> TypedBindingMap | None:
        if isinstance(self.binding, MultiType) and len(self.binding.bindings) > 0:
            return self.binding.bindings
        return None

    def get_bindings(self) -> dict[str, type] | None:
        """Return the selector bindings, or ``None`` when none were configured or the map is empty."""
        binding_map = self.get_binding_map()
        return binding_map.get_bindings() if binding_map is not None else None

    @property
    def suffix(self) -> str:
        return Path(self.file_name).suffix.lower()

    @property
    def is_multi_type(self) -> bool:
        return self.get_binding_map() is not None

    @property
    def is_bound(self) -> bool:
        return self.get_declared_type() is not None or self.is_multi_type


def _as_str(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    return value
