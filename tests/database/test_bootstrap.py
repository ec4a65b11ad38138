from __future__ import annotations

from src.driver_payroll.driver_payroll.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE t (id INT);\n"

    assert _strip_create_db_and_use(sql).strip() == "CREATE TABLE t (id INT);"


def test_statements_split_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES ('it\\'s');\n  \nSELECT 1"

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        "INSERT INTO t VALUES ('it\\'s')",
        "SELECT 1",
    ]
