from pathlib import Path

from payroll_system.database.bootstrap import (
    _strip_comments,
    _strip_create_db_and_use,
    iter_sql_statements,
)

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_schema_yields_only_table_statements():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))

    assert len(statements) == 3
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    assert "uq_attendance_worker_date (worker_id, work_date)" in statements[1]


def test_semicolons_inside_quotes_do_not_split():
    statements = list(iter_sql_statements("INSERT INTO t VALUES('a;b'); SELECT \"x;y\";"))

    assert statements == ["INSERT INTO t VALUES('a;b')", 'SELECT "x;y"']
