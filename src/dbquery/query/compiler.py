"""Assemble SQL92 statement text from builder state.

Predicate arguments may be nested to any depth::

    'a = 1'                          -> ['a = 1']
    (['a = 1', 'b = 2'], 'c = 3')    -> ['a = 1', 'b = 2', 'c = 3']

Flattening is depth-first and left-to-right; the flat list is then joined
into a conjunction with ``AND``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Union

Predicate = Union[str, Sequence['Predicate']]

AND = ' AND '


def iter_flat(args: Iterable[Predicate]) -> Iterator[str]:
    """Yield every leaf expression of *args*, depth-first."""
    for arg in args:
        if isinstance(arg, str):
            yield arg
        elif isinstance(arg, (list, tuple)):
            yield from iter_flat(arg)
        else:
            raise TypeError(
                f"Expected an expression string or a list of them, "
                f"got {type(arg).__name__}"
            )


def flatten(args: Iterable[Predicate]) -> list[str]:
    """Flatten nested predicate arguments into a list of expressions."""
    return list(iter_flat(args))


def conjunction(expressions: Sequence[str]) -> str:
    """Join *expressions* with ``AND``."""
    return AND.join(expressions)


def compile_set(assignments: dict[str, str]) -> str:
    """Compile the SET list, keeping insertion order."""
    return ', '.join(f'{column} = {value}' for column, value in assignments.items())


def compile_update(
    table: str,
    assignments: dict[str, str],
    where: str | None = None,
) -> str:
    """Compile a full statement: UPDATE t SET a = x[, ...][ WHERE p]."""
    sql = f'UPDATE {table} SET {compile_set(assignments)}'
    if where:
        sql += f' WHERE {where}'
    return sql
