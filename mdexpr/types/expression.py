"""Expression nodes for mdexpr trees.

An Expression is an ordered, immutable sequence of nodes, each either a Symbol
or another Expression. The tree is built once by the caller and only read by
the evaluator.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from mdexpr import Node
from mdexpr.errors import MdexprTypeError
from mdexpr.types.symbol import Symbol


class Expression:
    """Ordered sequence of Symbol / Expression nodes."""

    __slots__ = ("items",)

    def __init__(self, *items: Node):
        for item in items:
            if not isinstance(item, (Symbol, Expression)):
                raise MdexprTypeError(f"Expression items must be nodes, got {item!r}")
        self.items: tuple[Node, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Expression(*self.items[index])
        return self.items[index]

    def __eq__(self, other) -> bool:
        return isinstance(other, Expression) and self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(item) for item in self.items))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Expression{self.items!r}"


def build(obj) -> Node:
    """
    Build a tree from nested Python lists/tuples of strings.

    Strings become Symbols, lists and tuples become Expressions, and nodes
    pass through untouched. Raises MdexprTypeError on anything else.
    """
    if isinstance(obj, (Symbol, Expression)):
        return obj
    if isinstance(obj, str):
        return Symbol(obj)
    if isinstance(obj, (list, tuple)):
        return Expression(*(build(item) for item in obj))
    raise MdexprTypeError(f"Cannot build a node from {obj!r}")
