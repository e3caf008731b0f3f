from __future__ import annotations
import sys


class Symbol:
    """Leaf node: an immutable piece of text, equal to any symbol with the same text."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        # Interned: symbols are compared and hashed constantly as binding keys
        self.value: str = sys.intern(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Symbol({self.value!r})"

    def __str__(self):
        return self.value


EMPTY = Symbol("")
