"""Non-empty sequence type.

`NonEmptyList` is the only way the core represents "one or more" values
(IP lists sent to or received from the registrar). The length check lives in
the constructor and the type exposes no removal operation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, get_args, overload

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from porkers.core.errors import EmptyInputError

T = TypeVar("T")


class NonEmptyList(Sequence[T], Generic[T]):
    """Immutable sequence holding at least one element."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T]) -> None:
        data = tuple(items)
        if not data:
            raise EmptyInputError("NonEmptyList")
        self._items: tuple[T, ...] = data

    @classmethod
    def of(cls, first: T, *rest: T) -> "NonEmptyList[T]":
        return cls((first, *rest))

    @property
    def first(self) -> T:
        return self._items[0]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NonEmptyList):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"NonEmptyList({list(self._items)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate as a list of the item type, then enforce the length."""

        args = get_args(source_type)
        item_type = args[0] if args else Any
        items_schema = handler.generate_schema(list[item_type])  # type: ignore[valid-type]
        return core_schema.no_info_after_validator_function(
            cls,
            items_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                list,
                return_schema=items_schema,
            ),
        )
