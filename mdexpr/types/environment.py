"""Runtime environment for mdexpr.

The Environment pairs two namespaces keyed by Symbol: `functions` holds the
callables an expression head can dispatch to, `values` holds the nodes bound to
parameter names during a defined-function call. Every call works on its own
snapshot (see `copy`), so bindings never leak back to the caller or across to
sibling calls. Each snapshot keeps a link to the root environment it descends
from, which is where `define` publishes new functions.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, TYPE_CHECKING

from mdexpr import Node
from mdexpr.errors import MdexprInvalidSymbol, MdexprUnboundFunction
from mdexpr.types.symbol import Symbol

if TYPE_CHECKING:
    from mdexpr.types.function import Function


class Environment:
    """Two-namespace mapping of Symbols to functions and to nodes."""

    __slots__ = ("functions", "values", "root")

    def __init__(self, root: Optional[Environment] = None):
        self.functions: dict[Symbol, Function] = {}
        self.values: dict[Symbol, Node] = {}
        # A root environment is its own root
        self.root: Environment = root if root is not None else self

    @property
    def is_root(self) -> bool:
        return self.root is self

    @staticmethod
    def _check(symbol: Symbol) -> None:
        if not isinstance(symbol, Symbol):
            raise MdexprInvalidSymbol(f"Cannot bind {symbol!r} as a symbol")

    def exists(self, symbol: Symbol) -> bool:
        """True when `symbol` names a function in this environment."""
        self._check(symbol)
        return symbol in self.functions

    def lookup(self, symbol: Symbol) -> Function:
        """Return the function bound to `symbol`.

        Raises MdexprUnboundFunction if there is none.
        """
        self._check(symbol)
        try:
            return self.functions[symbol]
        except KeyError:
            raise MdexprUnboundFunction(f"Cannot lookup unbound function {symbol}") from None

    def register_function(self, symbol: Symbol, function: Function) -> None:
        self._check(symbol)
        self.functions[symbol] = function

    def register_symbol(self, symbol: Symbol, target: Node) -> None:
        self._check(symbol)
        self.values[symbol] = target

    def lookup_value(self, symbol: Symbol) -> Node:
        """Return the node bound to `symbol`, or the symbol itself when unbound."""
        return self.values.get(symbol, symbol)

    def copy(self) -> Environment:
        """Snapshot both namespaces into a new environment sharing this root."""
        result = Environment(self.root)
        result.functions.update(self.functions)
        result.values.update(self.values)
        return result

    def _write_map(self, buffer: StringIO, mapping: dict) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in mapping.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("functions=")
            buffer.write("{" + ", ".join(str(k) for k in self.functions) + "}")
            buffer.write(" values=")
            self._write_map(buffer, self.values)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {'root ' if self.is_root else ''}{self}>"
