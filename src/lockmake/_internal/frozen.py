"""Immutable mapping used inside frozen package records."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

KT = TypeVar("KT")
VT = TypeVar("VT")


class FrozenDict(Mapping[KT, VT], Generic[KT, VT]):
    """An immutable, hashable mapping that keeps insertion order.

    Order matters for patch lists, which are emitted in the order the
    lock file recorded them.
    """

    _data: dict[KT, VT]

    def __init__(
        self,
        mapping: Mapping[KT, VT] | Iterable[tuple[KT, VT]] = (),
        /,
    ) -> None:
        self._data = dict(mapping)

    def __getitem__(self, key: KT) -> VT:
        return self._data[key]

    def __iter__(self) -> Iterator[KT]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return list(self._data.items()) == list(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def ordered_values(self) -> list[VT]:
        """Values in insertion order, keys discarded."""
        return list(self._data.values())
