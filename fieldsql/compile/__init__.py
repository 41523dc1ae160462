"""fieldsql compilation layer: fields / sorts / pages → parameterized SQL."""
from fieldsql.compile.base import CompiledClause, ParamCounter
from fieldsql.compile.builder import QueryBuilder
from fieldsql.compile.tree import PredicateTreeBuilder
from fieldsql.compile.where import WhereBuilder

__all__ = [
    "CompiledClause",
    "ParamCounter",
    "QueryBuilder",
    "PredicateTreeBuilder",
    "WhereBuilder",
]
