"""
Factories wiring the store services to the configured database.
"""

from companies import CompanyService
from jobs import JobService
from shared import PostgreSQLDatabase
from shared.config import build_db_connection_string, load_environment

load_environment()


def get_database() -> PostgreSQLDatabase:
    """
    Get a PostgreSQLDatabase for the configured connection string.

    Returns:
        PostgreSQLDatabase instance
    """
    return PostgreSQLDatabase(connection_string=build_db_connection_string())


def get_company_service() -> CompanyService:
    """
    Get CompanyService instance with database connection.

    Returns:
        CompanyService instance
    """
    return CompanyService(database=get_database())


def get_job_service() -> JobService:
    """
    Get JobService instance with database connection.

    The job service shares its database with the company service it uses
    to attach companies to jobs.

    Returns:
        JobService instance
    """
    database = get_database()
    return JobService(database=database, company_service=CompanyService(database=database))
