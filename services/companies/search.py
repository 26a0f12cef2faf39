"""Search filters for the companies listing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from shared.errors import InvalidArgumentError
from shared.filters import (
    Number,
    coerce_non_negative_number,
    optional_text,
    resolve_aliases,
)
from shared.sql import CompiledClause, Predicate, compose_predicates

_ALIASES = {
    "nameLike": "name_like",
    "name_like": "name_like",
    "minEmployees": "min_employees",
    "min_employees": "min_employees",
    "maxEmployees": "max_employees",
    "max_employees": "max_employees",
}


@dataclass(frozen=True)
class CompanySearchFilters:
    """Optional criteria for listing companies; None means unset."""

    name_like: str | None = None
    min_employees: Number | None = None
    max_employees: Number | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> CompanySearchFilters:
        """Build filters from request-style keys (``nameLike``, ``minEmployees``, ...)."""
        values = resolve_aliases(raw, _ALIASES, "company")
        return cls(
            name_like=optional_text(values.get("name_like"), "nameLike"),
            min_employees=coerce_non_negative_number(values.get("min_employees"), "minEmployees"),
            max_employees=coerce_non_negative_number(values.get("max_employees"), "maxEmployees"),
        )


def compose_company_search(filters: CompanySearchFilters) -> CompiledClause:
    """Build the WHERE conjunction for a company listing.

    Raises:
        InvalidArgumentError: If minEmployees is greater than maxEmployees
    """
    name_like = optional_text(filters.name_like, "nameLike")
    min_employees = coerce_non_negative_number(filters.min_employees, "minEmployees")
    max_employees = coerce_non_negative_number(filters.max_employees, "maxEmployees")

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidArgumentError("minEmployees cannot be greater than maxEmployees")

    return compose_predicates(
        [
            Predicate("name ILIKE {}", active=name_like is not None, value=f"%{name_like}%"),
            Predicate("num_employees >= {}", active=min_employees is not None, value=min_employees),
            Predicate("num_employees <= {}", active=max_employees is not None, value=max_employees),
        ]
    )
