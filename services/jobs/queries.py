"""SQL statements for the jobs store.

Statements use PostgreSQL positional placeholders ($1, $2, ...) and are
bound through shared.database.execute.
"""

JOB_COLUMNS = """
        id,
        title,
        salary,
        equity,
        company_handle AS "companyHandle"
"""

INSERT_JOB = f"""
    INSERT INTO jobs (title, salary, equity, company_handle)
    VALUES ($1, $2, $3, $4)
    RETURNING {JOB_COLUMNS}
"""

# Every filter combination selects the same columns; the WHERE clause is
# appended by the service from the search filters
SELECT_JOBS = f"""
    SELECT {JOB_COLUMNS}
    FROM jobs
"""

ORDER_JOBS = " ORDER BY title, id"

GET_JOB_BY_ID = f"""
    SELECT {JOB_COLUMNS}
    FROM jobs
    WHERE id = $1
"""

# set_clause comes from sql_for_partial_update; id_placeholder follows its values
UPDATE_JOB = """
    UPDATE jobs
    SET {set_clause}
    WHERE id = {id_placeholder}
    RETURNING {columns}
"""

DELETE_JOB = """
    DELETE FROM jobs
    WHERE id = $1
    RETURNING id
"""
