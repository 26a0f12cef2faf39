"""SQL statements for companies.

Statements use PostgreSQL positional placeholders ($1, $2, ...) and are
bound through shared.database.execute.
"""

COMPANY_COLUMNS = """
        handle,
        name,
        description,
        num_employees AS "numEmployees",
        logo_url AS "logoUrl"
"""

INSERT_COMPANY = f"""
    INSERT INTO companies (handle, name, description, num_employees, logo_url)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING {COMPANY_COLUMNS}
"""

# WHERE clause is appended by the service from the search filters
SELECT_COMPANIES = f"""
    SELECT {COMPANY_COLUMNS}
    FROM companies
"""

ORDER_COMPANIES = " ORDER BY name"

GET_COMPANY_BY_HANDLE = f"""
    SELECT {COMPANY_COLUMNS}
    FROM companies
    WHERE handle = $1
"""

GET_JOBS_FOR_COMPANY = """
    SELECT id, title, salary, equity
    FROM jobs
    WHERE company_handle = $1
    ORDER BY id
"""

# set_clause comes from sql_for_partial_update; handle_placeholder follows its values
UPDATE_COMPANY = """
    UPDATE companies
    SET {set_clause}
    WHERE handle = {handle_placeholder}
    RETURNING {columns}
"""

DELETE_COMPANY = """
    DELETE FROM companies
    WHERE handle = $1
    RETURNING handle
"""
