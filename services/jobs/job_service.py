"""Service for storing and searching jobs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from companies.company_service import CompanyService
from shared.database import Database, execute, fetch_all_dicts, fetch_one_dict
from shared.errors import InvalidArgumentError, NotFoundError
from shared.sql import sql_for_partial_update, where_sql
from shared.structured_logging import get_structured_logger, log_with_context

from .queries import (
    DELETE_JOB,
    GET_JOB_BY_ID,
    INSERT_JOB,
    JOB_COLUMNS,
    ORDER_JOBS,
    SELECT_JOBS,
    UPDATE_JOB,
)
from .search import JobSearchFilters, compose_job_search

logger = logging.getLogger(__name__)

JOB_FIELD_MAP = {"companyHandle": "company_handle"}

# id and companyHandle are fixed once a job exists
UPDATABLE_JOB_FIELDS = ("title", "salary", "equity")


class JobService:
    """Service for storing and searching jobs."""

    def __init__(self, database: Database, company_service: CompanyService | None = None):
        """Initialize the job service.

        Args:
            database: Database connection interface
            company_service: Used to attach the company to a fetched job
                (defaults to one sharing the same database)
        """
        if not database:
            raise ValueError("Database is required")
        self.db = database
        self.company_service = company_service or CompanyService(database)

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create a job.

        Args:
            data: { title, salary, equity, companyHandle }

        Returns:
            { id, title, salary, equity, companyHandle }

        Raises:
            InvalidArgumentError: If title or companyHandle is missing
        """
        missing = [field for field in ("title", "companyHandle") if not data.get(field)]
        if missing:
            raise InvalidArgumentError(f"Missing required job field(s): {', '.join(missing)}")

        try:
            with self.db.get_cursor() as cur:
                execute(
                    cur,
                    INSERT_JOB,
                    (data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]),
                )
                job = fetch_one_dict(cur)
        except Exception as e:
            logger.error(f"Error creating job for company {data['companyHandle']}: {e}", exc_info=True)
            raise

        get_structured_logger(__name__, job_id=job["id"]).info(
            f"Created job for company {job['companyHandle']}"
        )
        return job

    def find_all(
        self, filters: JobSearchFilters | Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """List jobs, optionally filtered.

        Args:
            filters: JobSearchFilters, or a raw mapping with
                title / minSalary / hasEquity

        Returns:
            List of { id, title, salary, equity, companyHandle } ordered by title

        Raises:
            InvalidArgumentError: If a filter value is invalid
        """
        if filters is None:
            filters = JobSearchFilters()
        elif not isinstance(filters, JobSearchFilters):
            filters = JobSearchFilters.from_mapping(filters)

        clause = compose_job_search(filters)
        with self.db.get_cursor() as cur:
            execute(cur, SELECT_JOBS + where_sql(clause) + ORDER_JOBS, clause.ordered_values)
            jobs = fetch_all_dicts(cur)

        log_with_context(
            logger,
            logging.DEBUG,
            f"Retrieved {len(jobs)} job(s)",
            where=clause.clause_text or None,
            values=clause.ordered_values or None,
        )
        return jobs

    def get_by_id(self, job_id: int) -> dict[str, Any]:
        """Get a job with its company attached.

        Returns:
            { id, title, salary, equity, company }
            where company is { handle, name, description, numEmployees, logoUrl }

        Raises:
            NotFoundError: If no job has this id
        """
        with self.db.get_cursor() as cur:
            execute(cur, GET_JOB_BY_ID, (job_id,))
            job = fetch_one_dict(cur)

        if job is None:
            raise NotFoundError(f"No job: {job_id}")

        company_handle = job.pop("companyHandle")
        job["company"] = self.company_service.find_by_handle(company_handle)
        return job

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partially update a job; only the given fields change.

        Args:
            job_id: Job ID
            data: Any of { title, salary, equity }

        Returns:
            { id, title, salary, equity, companyHandle }

        Raises:
            InvalidArgumentError: If data is empty or names a field that cannot change
            NotFoundError: If no job has this id
        """
        unknown = [key for key in data if key not in UPDATABLE_JOB_FIELDS]
        if unknown:
            raise InvalidArgumentError(f"Cannot update job field(s): {', '.join(unknown)}")

        set_clause = sql_for_partial_update(data, JOB_FIELD_MAP)
        values = set_clause.ordered_values + (job_id,)
        statement = UPDATE_JOB.format(
            set_clause=set_clause.clause_text,
            id_placeholder=f"${len(values)}",
            columns=JOB_COLUMNS,
        )

        job_logger = get_structured_logger(__name__, job_id=job_id)
        try:
            with self.db.get_cursor() as cur:
                execute(cur, statement, values)
                job = fetch_one_dict(cur)
        except Exception as e:
            job_logger.error(f"Error updating job: {e}", exc_info=True)
            raise

        if job is None:
            raise NotFoundError(f"No job: {job_id}")

        job_logger.info(f"Updated job field(s): {', '.join(data)}")
        return job

    def remove(self, job_id: int) -> None:
        """Delete a job.

        Raises:
            NotFoundError: If no job has this id
        """
        with self.db.get_cursor() as cur:
            execute(cur, DELETE_JOB, (job_id,))
            deleted = cur.fetchone()

        if not deleted:
            raise NotFoundError(f"No job: {job_id}")

        get_structured_logger(__name__, job_id=job_id).info("Deleted job")
