"""Identifier resolution: alias substitution and SQL92 quoting.

Builders never hold a database connection; they only need something that
turns a raw name into the identifier text that ends up in the statement.
Any object with a ``resolve(name) -> str`` method will do::

    resolver = AliasResolver({'legends': 'hockey_legends', 'no': 'number'})
    resolver.resolve('legends')      # 'hockey_legends'
    resolver.resolve('legends.no')   # 'hockey_legends.number'
    resolver.resolve('price * 2')    # unchanged
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Protocol, runtime_checkable

from .exc import IdentifierError

_PLAIN_IDENT_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_$]*$')


@runtime_checkable
class IdentifierResolver(Protocol):
    """Turns a raw name or alias into the identifier used in SQL."""

    def resolve(self, name: str) -> str:
        ...


class AliasResolver:
    """Resolve names through an alias map, passing everything else through."""

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases: dict[str, str] = {}
        if aliases:
            self.set_aliases(aliases)

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def set_aliases(self, aliases: Mapping[str, str]) -> None:
        """Replace the alias map."""
        checked: dict[str, str] = {}
        for alias, target in aliases.items():
            if not isinstance(alias, str) or not alias.strip():
                raise IdentifierError(f"Invalid alias name: {alias!r}")
            if not isinstance(target, str) or not target.strip():
                raise IdentifierError(
                    f"Alias {alias!r} must map to a non-empty name, got {target!r}"
                )
            checked[alias] = target
        self._aliases = checked

    def resolve(self, name: Any) -> str:
        """Return the identifier for *name*.

        Numbers are rendered with ``str()`` so that ``set('size', 5)`` works.
        ``alias.column`` references resolve each part separately.
        """
        if name is None or isinstance(name, bool):
            raise IdentifierError(f"Cannot resolve identifier from {name!r}")
        if isinstance(name, (int, float)):
            return str(name)
        if not isinstance(name, str):
            raise IdentifierError(
                f"Identifier must be a string, got {type(name).__name__}"
            )
        if not name.strip():
            raise IdentifierError("Identifier must not be empty")

        if name in self._aliases:
            return self._aliases[name]

        if '.' in name and ' ' not in name:
            parts = name.split('.')
            if all(parts):
                return '.'.join(self._aliases.get(p, p) for p in parts)
        return name

    def __repr__(self) -> str:
        return f"AliasResolver({len(self._aliases)} aliases)"


def quote_identifier(name: str, quote_char: str = '"') -> str:
    """Quote *name* as a SQL92 delimited identifier.

    Dotted references are quoted part by part; embedded quote characters
    are doubled.
    """
    if not name or not name.strip():
        raise IdentifierError("Identifier must not be empty")
    doubled = quote_char * 2
    return '.'.join(
        f'{quote_char}{part.replace(quote_char, doubled)}{quote_char}'
        for part in name.split('.')
    )


def is_plain_identifier(name: str) -> bool:
    """True if *name* is a bare SQL identifier (no quoting needed)."""
    return bool(_PLAIN_IDENT_RE.match(name))
