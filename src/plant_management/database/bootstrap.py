from __future__ import annotations

import logging

import mysql.connector
from flask import Flask

from ..core.constants import DEFAULT_LEAVES
from ..extensions import db
from .connection import DBConfig

logger = logging.getLogger(__name__)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = mysql.connector.connect(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def init_schema(app: Flask, *, db_config: dict | None = None) -> list[str]:
    """Create the MySQL database when needed, then every mapped table (idempotent).

    Without an explicit db_config the DB_CONFIG stored on the app by create_app is used.
    """

    # Models must be imported so their tables are registered on db.metadata.
    from ..attendance.model import Attendance  # noqa: F401
    from ..employees.model import Employee  # noqa: F401
    from ..supervisors.model import Supervisor  # noqa: F401

    if db_config is None:
        db_config = app.config.get("DB_CONFIG")

    uri = str(app.config.get("SQLALCHEMY_DATABASE_URI", ""))
    if uri.startswith("mysql") and db_config:
        ensure_database_exists(db_config)

    with app.app_context():
        db.create_all()
        tables = sorted(db.metadata.tables)
    logger.info("Schema ready (tables=%s)", ", ".join(tables))
    return tables


def seed_demo_data(app: Flask) -> int:
    """Insert a demo supervisor with a small crew when the plant has no employees yet.

    Returns the number of employees created.
    """

    from ..employees.model import Employee
    from ..supervisors.model import Supervisor

    with app.app_context():
        if db.session.query(Employee).count():
            logger.info("Demo seed skipped: employees already present")
            return 0

        supervisor = Supervisor(full_name="Line Supervisor", email="supervisor@plant.local")
        crew = [
            Employee(full_name=name, supervisor=supervisor, leaves=DEFAULT_LEAVES)
            for name in ("Alex Moreno", "Priya Nair", "Tomasz Kowalski")
        ]
        db.session.add(supervisor)
        db.session.add_all(crew)
        db.session.commit()
        logger.info("Demo seed created supervisor %s with %d employees", supervisor.supervisor_id, len(crew))
        return len(crew)
