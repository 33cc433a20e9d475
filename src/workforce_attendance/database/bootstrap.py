from __future__ import annotations

import logging
from typing import Sequence

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS: Sequence[str] = (
    """
    CREATE TABLE IF NOT EXISTS employees (
        id INT AUTO_INCREMENT PRIMARY KEY,
        person_id VARCHAR(32) NOT NULL UNIQUE,
        name VARCHAR(120) NOT NULL,
        department VARCHAR(60) NULL,
        effective_date DATE NULL,
        resignation_date DATE NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS shifts (
        id INT AUTO_INCREMENT PRIMARY KEY,
        employee_id INT NOT NULL,
        start_time TIME NOT NULL,
        end_time TIME NOT NULL,
        active_date DATE NOT NULL,
        expiry_date DATE NULL,
        INDEX idx_shifts_employee (employee_id, active_date),
        CONSTRAINT fk_shifts_employee FOREIGN KEY (employee_id) REFERENCES employees(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS door3_raw (
        id INT AUTO_INCREMENT PRIMARY KEY,
        person_no VARCHAR(32) NOT NULL,
        date DATE NOT NULL,
        full_entry_timestamp DATETIME NULL,
        full_exit_timestamp DATETIME NULL,
        INDEX idx_raw_person_date (person_no, date)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS door3_manual_edits (
        id INT AUTO_INCREMENT PRIMARY KEY,
        person_no VARCHAR(32) NOT NULL,
        date DATE NOT NULL,
        manual_entry_timestamp DATETIME NULL,
        manual_exit_timestamp DATETIME NULL,
        edit_reason VARCHAR(255) NOT NULL,
        updated_by VARCHAR(120) NOT NULL,
        updated_at DATETIME NOT NULL,
        INDEX idx_manual_person_date (person_no, date)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS date_dim (
        date DATE PRIMARY KEY,
        day_type VARCHAR(40) NOT NULL DEFAULT 'Workday'
    )
    """,
)


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create missing tables (idempotent)."""

    with db_cursor(conn_factory) as (_, cur):
        for statement in SCHEMA_STATEMENTS:
            cur.execute(statement)
    logger.info("Schema ready (%d tables)", len(SCHEMA_STATEMENTS))


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in fetchall(cur)]
