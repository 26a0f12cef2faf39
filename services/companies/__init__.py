"""Company store service."""

from .company_service import CompanyService
from .search import CompanySearchFilters, compose_company_search

__all__ = ["CompanyService", "CompanySearchFilters", "compose_company_search"]
