"""Unit tests for CompanyService and company search."""

from unittest.mock import PropertyMock

import pytest

from companies.company_service import CompanyService
from companies.search import CompanySearchFilters, compose_company_search
from shared.errors import InvalidArgumentError, NotFoundError
from shared.sql import CompiledClause


@pytest.fixture
def company_service(mock_database):
    """Create a CompanyService instance with mocked database."""
    return CompanyService(database=mock_database)


class TestComposeCompanySearch:
    """Test cases for compose_company_search."""

    def test_no_filters(self):
        assert compose_company_search(CompanySearchFilters()) == CompiledClause("", ())

    def test_all_filters(self):
        result = compose_company_search(
            CompanySearchFilters(name_like="net", min_employees=10, max_employees=500)
        )

        assert result.clause_text == (
            "name ILIKE $1 AND num_employees >= $2 AND num_employees <= $3"
        )
        assert result.ordered_values == ("%net%", 10, 500)

    def test_max_only_is_numbered_from_one(self):
        result = compose_company_search(CompanySearchFilters(max_employees=0))

        assert result == CompiledClause("num_employees <= $1", (0,))

    def test_min_greater_than_max_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="cannot be greater"):
            compose_company_search(CompanySearchFilters(min_employees=10, max_employees=5))

    def test_from_mapping(self):
        filters = CompanySearchFilters.from_mapping({"nameLike": "c", "minEmployees": "2"})

        assert filters == CompanySearchFilters(name_like="c", min_employees=2)

    def test_from_mapping_same_filter_twice(self):
        with pytest.raises(InvalidArgumentError, match="given twice"):
            CompanySearchFilters.from_mapping({"nameLike": "a", "name_like": "b"})

    def test_from_mapping_unknown_key(self):
        with pytest.raises(InvalidArgumentError, match="Unknown company filter"):
            CompanySearchFilters.from_mapping({"size": 3})


class TestCompanyService:
    """Test cases for CompanyService."""

    def test_init_requires_database(self):
        with pytest.raises(ValueError, match="Database is required"):
            CompanyService(database=None)

    def test_create(self, company_service, mock_cursor, company_columns):
        mock_cursor.description = company_columns
        mock_cursor.fetchone.return_value = ("new", "New", "New Description", 1, "http://new.img")

        company = company_service.create(
            {
                "handle": "new",
                "name": "New",
                "description": "New Description",
                "numEmployees": 1,
                "logoUrl": "http://new.img",
            }
        )

        assert company["numEmployees"] == 1
        assert mock_cursor.execute.call_args[0][1] == (
            "new",
            "New",
            "New Description",
            1,
            "http://new.img",
        )

    def test_create_requires_handle_and_name(self, company_service):
        with pytest.raises(InvalidArgumentError, match="handle, name"):
            company_service.create({"description": "x"})

    def test_find_all_with_filters(self, company_service, mock_cursor, company_columns):
        mock_cursor.description = company_columns
        mock_cursor.fetchall.return_value = [("c1", "C1", "Desc1", 1, "http://c1.img")]

        companies = company_service.find_all({"nameLike": "c", "maxEmployees": 2})

        assert companies[0]["handle"] == "c1"
        query, params = mock_cursor.execute.call_args[0]
        assert "WHERE name ILIKE %s AND num_employees <= %s ORDER BY name" in query
        assert params == ("%c%", 2)

    def test_find_by_handle_returns_none_when_missing(self, company_service, mock_cursor):
        mock_cursor.fetchone.return_value = None

        assert company_service.find_by_handle("nope") is None

    def test_get_by_handle_attaches_jobs(self, company_service, mock_cursor, company_columns):
        type(mock_cursor).description = PropertyMock(
            side_effect=[company_columns, [("id",), ("title",), ("salary",), ("equity",)]]
        )
        mock_cursor.fetchone.return_value = ("c1", "C1", "Desc1", 1, "http://c1.img")
        mock_cursor.fetchall.return_value = [(1, "Job1", 100, "0.12")]

        company = company_service.get_by_handle("c1")

        assert company["name"] == "C1"
        assert company["jobs"] == [{"id": 1, "title": "Job1", "salary": 100, "equity": "0.12"}]

    def test_get_by_handle_not_found(self, company_service, mock_cursor):
        mock_cursor.fetchone.return_value = None

        with pytest.raises(NotFoundError, match="No company: nope"):
            company_service.get_by_handle("nope")

        assert mock_cursor.execute.call_count == 1

    def test_update_maps_field_names(self, company_service, mock_cursor, company_columns):
        """Test that logical field names are translated to column names."""
        mock_cursor.description = company_columns
        mock_cursor.fetchone.return_value = ("c1", "C1", "Desc1", 10, "http://new.img")

        company_service.update("c1", {"numEmployees": 10, "logoUrl": "http://new.img"})

        query, params = mock_cursor.execute.call_args[0]
        assert 'SET "num_employees"=%s, "logo_url"=%s' in query
        assert "WHERE handle = %s" in query
        assert params == (10, "http://new.img", "c1")

    def test_update_rejects_handle(self, company_service):
        with pytest.raises(InvalidArgumentError, match="Cannot update company field"):
            company_service.update("c1", {"handle": "c9"})

    def test_update_empty_data(self, company_service):
        with pytest.raises(InvalidArgumentError, match="No fields to update"):
            company_service.update("c1", {})

    def test_update_not_found(self, company_service, mock_cursor):
        mock_cursor.fetchone.return_value = None

        with pytest.raises(NotFoundError):
            company_service.update("nope", {"name": "x"})

    def test_remove_not_found(self, company_service, mock_cursor):
        mock_cursor.fetchone.return_value = None

        with pytest.raises(NotFoundError, match="No company: nope"):
            company_service.remove("nope")
