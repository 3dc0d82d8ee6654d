from __future__ import annotations
from typing import Any, Iterator, List

from Errors import CapacityExceeded


class BoundedSeq:
    capacity: int
    name: str
    items: List[Any]

    def __init__(self, capacity: int, name: str = "sequence") -> None:
        if capacity < 1:
            raise CapacityExceeded(f"A buffer of {name}s needs room for at "
                                   f"least one, got capacity {capacity}")
        self.capacity = capacity
        self.name = name
        self.items = []

    def append(self, item: Any) -> None:
        if len(self.items) >= self.capacity:
            raise CapacityExceeded(f"Too many {self.name}s, at most "
                                   f"{self.capacity} fit in the buffer")
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, idx: int) -> Any:
        return self.items[idx]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __eq__(self, __o: object) -> bool:
        if isinstance(__o, BoundedSeq):
            return self.items == __o.items
        return self.items == __o

    def __str__(self) -> str:
        return str(self.items)

    def __repr__(self) -> str:
        return f"BoundedSeq({self.name}, {self.items}/{self.capacity})"
