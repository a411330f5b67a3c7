from .compiler import Predicate, compile_update, conjunction, flatten
from .expressions import Expression
from .update import UpdateQuery

__all__ = [
    'Predicate', 'compile_update', 'conjunction', 'flatten',
    'Expression', 'UpdateQuery',
]
