"""Compiler output and placeholder bookkeeping.

PostgreSQL positional placeholders (``$1``, ``$2``, ...) are used throughout,
compatible with ``asyncpg`` and with psycopg's server-side binding.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CompiledClause:
    """The output of a successful clause compilation.

    Attributes:
        sql: The SQL fragment with positional placeholders.
        args: Values for the placeholders; ``args[k]`` binds ``$k+1``.
    """

    sql: str
    args: list[Any] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        # Allows ``sql, args = build_where(fields)``.
        return iter((self.sql, self.args))


def placeholder(position: int) -> str:
    """Return the PostgreSQL placeholder for a 1-based ``position``."""
    return f"${position}"


@dataclass
class ParamCounter:
    """Accumulates positional arguments during a single compilation run.

    ``current`` is the number the next bound value will get.
    """

    args: list[Any] = field(default_factory=list)
    current: int = 1

    def bind(self, value: Any) -> str:
        """Store ``value`` and return its placeholder."""
        text = placeholder(self.current)
        self.args.append(value)
        self.current += 1
        return text
