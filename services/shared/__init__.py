"""
Shared infrastructure for services.

Database access, SQL clause builders, errors, and logging helpers used by
every store service.
"""

from .database import Database, PostgreSQLDatabase
from .errors import InvalidArgumentError, NotFoundError, ServiceError
from .sql import CompiledClause, Predicate, compose_predicates, sql_for_partial_update

__all__ = [
    "Database",
    "PostgreSQLDatabase",
    "ServiceError",
    "InvalidArgumentError",
    "NotFoundError",
    "CompiledClause",
    "Predicate",
    "compose_predicates",
    "sql_for_partial_update",
]
