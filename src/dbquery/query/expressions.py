"""SQL92 expression construction.

Every helper returns plain SQL text, ready to be passed to
``UpdateQuery.set()`` or ``UpdateQuery.where()``::

    e = query.expr
    query.where(e.eq('id', query.bind_value(5)),
                e.l_or(e.gt('price', 100), e.is_null('price')))
"""

from __future__ import annotations

from typing import Any

from ..exc import ErrorKind, ValidationError
from ..identifiers import AliasResolver, IdentifierResolver
from .compiler import Predicate, flatten


class Expression:
    """Builds comparison, logical and arithmetic expressions.

    Operands are passed through the resolver, so aliases work in
    expressions exactly as they do in ``update()`` and ``set()``.
    """

    def __init__(self, resolver: IdentifierResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else AliasResolver()

    def _id(self, name: Any) -> str:
        return self.resolver.resolve(name)

    def _binary(self, op: str, left: Any, right: Any) -> str:
        return f'{self._id(left)} {op} {self._id(right)}'

    # ── Comparison ────────────────────────────────────────────────

    def eq(self, left: Any, right: Any) -> str:
        return self._binary('=', left, right)

    def neq(self, left: Any, right: Any) -> str:
        return self._binary('<>', left, right)

    def gt(self, left: Any, right: Any) -> str:
        return self._binary('>', left, right)

    def gte(self, left: Any, right: Any) -> str:
        return self._binary('>=', left, right)

    def lt(self, left: Any, right: Any) -> str:
        return self._binary('<', left, right)

    def lte(self, left: Any, right: Any) -> str:
        return self._binary('<=', left, right)

    def like(self, column: Any, pattern: str) -> str:
        return f'{self._id(column)} LIKE {pattern}'

    def is_null(self, column: Any) -> str:
        return f'{self._id(column)} IS NULL'

    def is_not_null(self, column: Any) -> str:
        return f'{self._id(column)} IS NOT NULL'

    def between(self, column: Any, low: Any, high: Any) -> str:
        return f'{self._id(column)} BETWEEN {self._id(low)} AND {self._id(high)}'

    def in_(self, column: Any, *values: Predicate | int | float) -> str:
        """``column IN ( v1, v2, ... )``; values may be nested lists."""
        items = flatten(self._values(v) for v in values)
        if not items:
            raise ValidationError(
                ErrorKind.EMPTY_ARGUMENTS, "in_() expects at least one value"
            )
        return f'{self._id(column)} IN ( {", ".join(items)} )'

    # ── Logical ───────────────────────────────────────────────────

    def l_and(self, *expressions: Predicate) -> str:
        return self._logical('AND', 'l_and', expressions)

    def l_or(self, *expressions: Predicate) -> str:
        return self._logical('OR', 'l_or', expressions)

    def not_(self, expression: str) -> str:
        return f'NOT ( {expression} )'

    def _values(self, value: Any) -> Any:
        """Resolve scalar IN-list values, descending into nested lists."""
        if isinstance(value, (list, tuple)):
            return [self._values(v) for v in value]
        return self._id(value)

    def _logical(self, op: str, name: str, expressions: tuple[Predicate, ...]) -> str:
        items = flatten(expressions)
        if not items:
            raise ValidationError(
                ErrorKind.EMPTY_ARGUMENTS, f"{name}() expects at least one expression"
            )
        if len(items) == 1:
            return items[0]
        return '( ' + f' {op} '.join(items) + ' )'

    # ── Arithmetic ────────────────────────────────────────────────

    def add(self, left: Any, right: Any) -> str:
        return self._binary('+', left, right)

    def sub(self, left: Any, right: Any) -> str:
        return self._binary('-', left, right)

    def mul(self, left: Any, right: Any) -> str:
        return self._binary('*', left, right)

    def div(self, left: Any, right: Any) -> str:
        return self._binary('/', left, right)

