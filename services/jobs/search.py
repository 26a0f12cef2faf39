"""Search filters for the jobs listing.

Each filter is optional on its own. The WHERE clause is composed in one
pass over the filters in a fixed order (title, minimum salary, equity), so
every combination gets exactly its active predicates with contiguous
placeholders.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from shared.filters import (
    Number,
    coerce_flag,
    coerce_non_negative_number,
    optional_text,
    resolve_aliases,
)
from shared.sql import CompiledClause, Predicate, compose_predicates

_ALIASES = {
    "title": "title",
    "minSalary": "min_salary",
    "min_salary": "min_salary",
    "hasEquity": "has_equity",
    "has_equity": "has_equity",
}


@dataclass(frozen=True)
class JobSearchFilters:
    """Optional criteria for listing jobs.

    Attributes:
        title: Case-insensitive substring of the job title
        min_salary: Lowest salary to include; 0 is a real filter
        has_equity: True limits to jobs with equity > 0; False or None adds no constraint
    """

    title: str | None = None
    min_salary: Number | None = None
    has_equity: bool | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> JobSearchFilters:
        """Build filters from request-style keys (``title``, ``minSalary``, ``hasEquity``).

        Raises:
            InvalidArgumentError: On unknown or repeated keys, or a non-numeric minSalary
        """
        values = resolve_aliases(raw, _ALIASES, "job")
        return cls(
            title=optional_text(values.get("title"), "title"),
            min_salary=coerce_non_negative_number(values.get("min_salary"), "minSalary"),
            has_equity=coerce_flag(values.get("has_equity"), "hasEquity"),
        )


def compose_job_search(filters: JobSearchFilters) -> CompiledClause:
    """Build the WHERE conjunction for a job listing.

    Example:
        >>> compose_job_search(JobSearchFilters(title="1", min_salary=250, has_equity=True))
        CompiledClause(clause_text='title ILIKE $1 AND salary >= $2 AND equity > 0', ordered_values=('%1%', 250))

    Returns:
        CompiledClause; empty clause text (match all jobs) when no filter is set

    Raises:
        InvalidArgumentError: If min_salary is not a non-negative number
    """
    title = optional_text(filters.title, "title")
    min_salary = coerce_non_negative_number(filters.min_salary, "minSalary")

    return compose_predicates(
        [
            Predicate("title ILIKE {}", active=title is not None, value=f"%{title}%"),
            Predicate("salary >= {}", active=min_salary is not None, value=min_salary),
            Predicate("equity > 0", active=filters.has_equity is True, binds_value=False),
        ]
    )
