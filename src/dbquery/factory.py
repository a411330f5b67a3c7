"""QueryFactory: hands out builders that share one identifier resolver."""

from __future__ import annotations

from typing import Mapping

from .identifiers import AliasResolver, IdentifierResolver
from .query.update import UpdateQuery


class QueryFactory:
    """Creates query builders bound to a common resolver.

    Usage::

        db = QueryFactory(aliases={'legends': 'hockey_legends'})
        sql = db.update('legends').set('Gretzky', 99).compile()
    """

    def __init__(
        self,
        resolver: IdentifierResolver | None = None,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        if resolver is not None and aliases:
            raise ValueError("Pass either a resolver or aliases, not both")
        self.resolver = resolver if resolver is not None else AliasResolver(aliases)

    def create_update_query(self) -> UpdateQuery:
        """Return a fresh :class:`UpdateQuery`."""
        return UpdateQuery(self.resolver)

    def update(self, table: str) -> UpdateQuery:
        """Shortcut for ``create_update_query().update(table)``."""
        return self.create_update_query().update(table)

    def __repr__(self) -> str:
        return f"QueryFactory({self.resolver!r})"
