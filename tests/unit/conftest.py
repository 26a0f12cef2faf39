"""
Pytest configuration and fixtures for unit tests.

Unit tests are fast, isolated tests that don't require external dependencies.
"""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_cursor():
    """Cursor returned by the mocked database."""
    return Mock()


@pytest.fixture
def mock_database(mock_cursor):
    """Mock database whose get_cursor() context yields mock_cursor."""
    db = Mock()
    db.get_cursor.return_value.__enter__ = Mock(return_value=mock_cursor)
    db.get_cursor.return_value.__exit__ = Mock(return_value=False)
    return db


@pytest.fixture
def job_columns():
    """Cursor description for job rows."""
    return [("id",), ("title",), ("salary",), ("equity",), ("companyHandle",)]


@pytest.fixture
def company_columns():
    """Cursor description for company rows."""
    return [("handle",), ("name",), ("description",), ("numEmployees",), ("logoUrl",)]
