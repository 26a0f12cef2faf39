"""Company Store Service.

Service for reading and writing the companies table.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from shared.database import Database, execute, fetch_all_dicts, fetch_one_dict
from shared.errors import InvalidArgumentError, NotFoundError
from shared.sql import sql_for_partial_update, where_sql
from shared.structured_logging import get_structured_logger, log_with_context

from .queries import (
    COMPANY_COLUMNS,
    DELETE_COMPANY,
    GET_COMPANY_BY_HANDLE,
    GET_JOBS_FOR_COMPANY,
    INSERT_COMPANY,
    ORDER_COMPANIES,
    SELECT_COMPANIES,
    UPDATE_COMPANY,
)
from .search import CompanySearchFilters, compose_company_search

logger = logging.getLogger(__name__)

COMPANY_FIELD_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

UPDATABLE_COMPANY_FIELDS = ("name", "description", "numEmployees", "logoUrl")


class CompanyService:
    """Service for managing companies."""

    def __init__(self, database: Database):
        """Initialize the company service.

        Args:
            database: Database connection interface (implements Database protocol)
        """
        if not database:
            raise ValueError("Database is required")
        self.db = database

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create a company.

        Args:
            data: { handle, name, description, numEmployees, logoUrl }

        Returns:
            The created company

        Raises:
            InvalidArgumentError: If handle or name is missing
        """
        missing = [field for field in ("handle", "name") if not data.get(field)]
        if missing:
            raise InvalidArgumentError(f"Missing required company field(s): {', '.join(missing)}")

        company_logger = get_structured_logger(__name__, company_handle=data["handle"])
        try:
            with self.db.get_cursor() as cur:
                execute(
                    cur,
                    INSERT_COMPANY,
                    (
                        data["handle"],
                        data["name"],
                        data.get("description"),
                        data.get("numEmployees"),
                        data.get("logoUrl"),
                    ),
                )
                company = fetch_one_dict(cur)
        except Exception as e:
            company_logger.error(f"Error creating company: {e}", exc_info=True)
            raise

        company_logger.info("Created company")
        return company

    def find_all(
        self, filters: CompanySearchFilters | Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """List companies, optionally filtered.

        Args:
            filters: CompanySearchFilters, or a raw mapping with
                nameLike / minEmployees / maxEmployees

        Returns:
            List of company dictionaries ordered by name
        """
        if filters is None:
            filters = CompanySearchFilters()
        elif not isinstance(filters, CompanySearchFilters):
            filters = CompanySearchFilters.from_mapping(filters)

        clause = compose_company_search(filters)
        with self.db.get_cursor() as cur:
            execute(cur, SELECT_COMPANIES + where_sql(clause) + ORDER_COMPANIES, clause.ordered_values)
            companies = fetch_all_dicts(cur)

        log_with_context(
            logger,
            logging.DEBUG,
            f"Retrieved {len(companies)} company(ies)",
            where=clause.clause_text or None,
            values=clause.ordered_values or None,
        )
        return companies

    def find_by_handle(self, handle: str) -> dict[str, Any] | None:
        """Get a company by handle without its jobs.

        Returns:
            Company dictionary or None if not found
        """
        with self.db.get_cursor() as cur:
            execute(cur, GET_COMPANY_BY_HANDLE, (handle,))
            return fetch_one_dict(cur)

    def get_by_handle(self, handle: str) -> dict[str, Any]:
        """Get a company with the jobs it posts.

        Returns:
            { handle, name, description, numEmployees, logoUrl, jobs }

        Raises:
            NotFoundError: If no company has this handle
        """
        with self.db.get_cursor() as cur:
            execute(cur, GET_COMPANY_BY_HANDLE, (handle,))
            company = fetch_one_dict(cur)
            if company is None:
                raise NotFoundError(f"No company: {handle}")

            execute(cur, GET_JOBS_FOR_COMPANY, (handle,))
            company["jobs"] = fetch_all_dicts(cur)

        return company

    def update(self, handle: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partially update a company; only the given fields change.

        Args:
            handle: Company handle
            data: Any of { name, description, numEmployees, logoUrl }

        Returns:
            The updated company

        Raises:
            InvalidArgumentError: If data is empty or names a field that cannot change
            NotFoundError: If no company has this handle
        """
        unknown = [key for key in data if key not in UPDATABLE_COMPANY_FIELDS]
        if unknown:
            raise InvalidArgumentError(f"Cannot update company field(s): {', '.join(unknown)}")

        set_clause = sql_for_partial_update(data, COMPANY_FIELD_MAP)
        values = set_clause.ordered_values + (handle,)
        statement = UPDATE_COMPANY.format(
            set_clause=set_clause.clause_text,
            handle_placeholder=f"${len(values)}",
            columns=COMPANY_COLUMNS,
        )

        with self.db.get_cursor() as cur:
            execute(cur, statement, values)
            company = fetch_one_dict(cur)

        if company is None:
            raise NotFoundError(f"No company: {handle}")

        get_structured_logger(__name__, company_handle=handle).info(
            f"Updated company field(s): {', '.join(data)}"
        )
        return company

    def remove(self, handle: str) -> None:
        """Delete a company.

        Raises:
            NotFoundError: If no company has this handle
        """
        with self.db.get_cursor() as cur:
            execute(cur, DELETE_COMPANY, (handle,))
            deleted = cur.fetchone()

        if not deleted:
            raise NotFoundError(f"No company: {handle}")

        get_structured_logger(__name__, company_handle=handle).info("Deleted company")
