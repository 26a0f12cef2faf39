"""Builders for parameterized SQL clauses.

Clauses use PostgreSQL positional placeholders ($1, $2, ...). Placeholder
``$i`` binds to ``ordered_values[i - 1]``; numbering is contiguous from the
first placeholder and follows the order in which placeholders appear in
the clause text. Column names come from application code, never from
request data.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgumentError

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class CompiledClause:
    """A SQL fragment and the values bound to its placeholders."""

    clause_text: str
    ordered_values: tuple[Any, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.clause_text


@dataclass(frozen=True)
class Predicate:
    """One optional condition of a WHERE conjunction.

    ``fragment`` holds ``{}`` where the placeholder goes. Predicates with
    ``binds_value=False`` are emitted verbatim and bind nothing.
    """

    fragment: str
    active: bool
    value: Any = None
    binds_value: bool = True


def quote_identifier(name: str) -> str:
    """Quote a column name, doubling any embedded double quotes."""
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data_to_update: Mapping[str, Any], field_map: Mapping[str, str] | None = None
) -> CompiledClause:
    """Build the SET list of a partial update.

    Keys are logical field names; ``field_map`` translates them to column
    names and keys missing from it are used as the column name verbatim.

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        CompiledClause(clause_text='"first_name"=$1, "age"=$2', ordered_values=('Aliya', 32))

    Args:
        data_to_update: Fields to change, in the order they were supplied
        field_map: Logical name to column name mapping (optional)

    Returns:
        CompiledClause with the SET list and its values

    Raises:
        InvalidArgumentError: If data_to_update is empty
    """
    # Clause and values both come from this one list so their order cannot drift
    items = list(data_to_update.items())
    if not items:
        raise InvalidArgumentError("No fields to update")

    field_map = field_map or {}
    columns = [
        f"{quote_identifier(field_map.get(key, key))}=${idx}"
        for idx, (key, _value) in enumerate(items, start=1)
    ]
    return CompiledClause(
        clause_text=", ".join(columns),
        ordered_values=tuple(value for _key, value in items),
    )


def compose_predicates(predicates: Iterable[Predicate]) -> CompiledClause:
    """AND together the active predicates in the order given.

    Args:
        predicates: Candidate predicates; inactive ones are skipped

    Returns:
        CompiledClause; empty clause text when no predicate is active
    """
    fragments: list[str] = []
    values: list[Any] = []
    for predicate in predicates:
        if not predicate.active:
            continue
        if predicate.binds_value:
            values.append(predicate.value)
            fragments.append(predicate.fragment.format(f"${len(values)}"))
        else:
            fragments.append(predicate.fragment)

    return CompiledClause(clause_text=" AND ".join(fragments), ordered_values=tuple(values))


def where_sql(clause: CompiledClause) -> str:
    """Render a compiled predicate as a WHERE clause, or nothing when it is empty."""
    if clause.is_empty:
        return ""
    return f" WHERE {clause.clause_text}"


def to_pyformat(statement: str, values: Sequence[Any]) -> tuple[str, tuple[Any, ...]]:
    """Rewrite a ``$n`` statement for a ``%s`` (pyformat) driver such as psycopg2.

    The statement must use each placeholder once, as ``$1..$n`` in order of
    appearance, with exactly ``n`` values. Literal ``%`` is escaped.

    Raises:
        InvalidArgumentError: If placeholders and values do not line up
    """
    values = tuple(values)
    numbers = [int(number) for number in PLACEHOLDER_PATTERN.findall(statement)]
    if numbers != list(range(1, len(values) + 1)):
        raise InvalidArgumentError(
            f"Placeholders {numbers} do not bind {len(values)} value(s) in order"
        )
    return PLACEHOLDER_PATTERN.sub("%s", statement.replace("%", "%%")), values
