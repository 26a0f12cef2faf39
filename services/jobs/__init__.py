"""Job store and search services."""

from .job_service import JobService
from .search import JobSearchFilters, compose_job_search

__all__ = ["JobService", "JobSearchFilters", "compose_job_search"]
