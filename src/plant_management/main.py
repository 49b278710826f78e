from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import init_schema, seed_demo_data
from .database.connection import resolve_database_uri
from .employees.controller import register as register_employees
from .extensions import db
from .supervisors.controller import register as register_supervisors

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(getattr(settings, "DB_CONFIG", {}))
    app.config["DB_CONFIG"] = db_config
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SQLALCHEMY_DATABASE_URI"] = resolve_database_uri(settings)
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    logging.basicConfig(
        level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting plant-management with settings=%s", settings_module)

    db.init_app(app)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        init_schema(app, db_config=db_config)
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(app)

    container = build_container(session=db.session)
    app.extensions["plant_management"] = container

    register_supervisors(app, container)
    register_employees(app, container)
    register_attendance(app, container)

    return app
