"""UpdateQuery: chainable UPDATE query builder -> UPDATE t SET ... WHERE ..."""

from __future__ import annotations

import logging
from typing import Any

from ..exc import ErrorKind, InvalidQueryError, ValidationError
from ..identifiers import AliasResolver, IdentifierResolver, is_plain_identifier
from .compiler import AND, Predicate, compile_update, conjunction, flatten
from .expressions import Expression

log = logging.getLogger("dbquery.query")


class UpdateQuery:
    """Chainable UPDATE query builder.

    Usage::

        q = UpdateQuery()
        q.update('legends').set('Gretzky', 99).set('Lindros', 88)
        q.where(q.expr.eq('league', q.bind_value('NHL')))
        q.compile()
        # "UPDATE legends SET Gretzky = 99, Lindros = 88 WHERE league = :dbqValue1"

    UPDATE ... FROM (SELECT ...) is not supported.
    """

    def __init__(self, resolver: IdentifierResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else AliasResolver()
        self.expr = Expression(self.resolver)
        self._table: str | None = None
        self._assignments: dict[str, str] = {}
        self._where: str | None = None
        self._params: dict[str, Any] = {}
        self._param_counter = 0

    def update(self, table: str) -> UpdateQuery:
        """Set the target table, replacing any previous one."""
        self._table = self.resolver.resolve(table)
        return self

    def set(self, column: str, expression: Any) -> UpdateQuery:
        """Assign *expression* to *column*.

        Re-assigning a column keeps its original position in the SET list.
        """
        column = self.resolver.resolve(column)
        self._assignments[column] = self.resolver.resolve(expression)
        return self

    def where(self, *expressions: Predicate) -> UpdateQuery:
        """Add WHERE conditions (ANDed together).

        Each argument is an expression or a (nested) list of expressions.
        Repeated calls are ANDed onto the existing conditions. Blank
        expressions are skipped.
        """
        flat = [e for e in flatten(expressions) if e.strip()]
        if not flat:
            log.debug("where() rejected: no expressions in %d argument(s)",
                      len(expressions))
            raise ValidationError(
                ErrorKind.EMPTY_PREDICATE,
                "where() expects at least one expression",
            )
        added = conjunction(flat)
        if self._where is None:
            self._where = added
        else:
            self._where += AND + added
        return self

    def bind_value(self, value: Any, name: str | None = None) -> str:
        """Bind *value* and return its placeholder, e.g. ``:dbqValue1``.

        Generated names skip any name already bound. Binding an explicit
        name twice rebinds it to the new value.
        """
        if name is None:
            self._param_counter += 1
            while f'dbqValue{self._param_counter}' in self._params:
                self._param_counter += 1
            name = f'dbqValue{self._param_counter}'
        elif not isinstance(name, str) or not is_plain_identifier(name):
            raise ValidationError(
                ErrorKind.INVALID_PARAMETER,
                f"Invalid parameter name: {name!r}",
            )
        self._params[name] = value
        return f':{name}'

    @property
    def params(self) -> dict[str, Any]:
        """Bound values keyed by placeholder name (without the colon)."""
        return dict(self._params)

    @property
    def table(self) -> str | None:
        return self._table

    @property
    def assignments(self) -> dict[str, str]:
        return dict(self._assignments)

    @property
    def where_clause(self) -> str | None:
        """The accumulated WHERE conjunction, without the keyword."""
        return self._where

    def compile(self) -> str:
        """Compile to an SQL92 UPDATE statement.

        Raises
        ------
        InvalidQueryError
            If no table or no assignments have been set.
        """
        if self._table is None:
            log.debug("UPDATE rejected: no table set")
            raise InvalidQueryError(ErrorKind.MISSING_TABLE, "UPDATE: No table set.")
        if not self._assignments:
            log.debug("UPDATE rejected: no values set for %s", self._table)
            raise InvalidQueryError(ErrorKind.NO_ASSIGNMENTS, "UPDATE: No values set.")

        sql = compile_update(self._table, self._assignments, self._where)
        log.debug("Compiled: %s", sql)
        return sql

    def __str__(self) -> str:
        return self.compile()

    def __repr__(self) -> str:
        try:
            return f"UpdateQuery({self.compile()})"
        except InvalidQueryError as exc:
            return f"UpdateQuery(<incomplete: {exc.kind.value}>)"
