"""dbquery — database-independent SQL92 UPDATE query builder.

Usage::

    from dbquery import QueryFactory

    db = QueryFactory(aliases={'legends': 'hockey_legends'})
    q = db.update('legends')
    q.set('Gretzky', 99).set('Lindros', 88)
    q.where(q.expr.eq('id', q.bind_value(5)))

    q.compile()
    # "UPDATE hockey_legends SET Gretzky = 99, Lindros = 88 WHERE id = :dbqValue1"
    q.params
    # {'dbqValue1': 5}
"""

from .identifiers import (
    IdentifierResolver, AliasResolver, quote_identifier, is_plain_identifier,
)
from .query.update import UpdateQuery
from .query.expressions import Expression
from .query.compiler import Predicate, flatten, conjunction, compile_update
from .factory import QueryFactory
from .config import load_config, resolver_from_config, factory_from_config
from .exc import (
    DbQueryError, ValidationError, InvalidQueryError, IdentifierError, ErrorKind,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    'UpdateQuery', 'QueryFactory', 'Expression',
    'IdentifierResolver', 'AliasResolver', 'quote_identifier',
    'is_plain_identifier',
    'Predicate', 'flatten', 'conjunction', 'compile_update',
    # Config
    'load_config', 'resolver_from_config', 'factory_from_config',
    # Exceptions
    'DbQueryError', 'ValidationError', 'InvalidQueryError',
    'IdentifierError', 'ErrorKind',
]
