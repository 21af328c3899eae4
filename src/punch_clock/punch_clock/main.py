from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .storage.data_files import DataFiles
from .terminal.controller import register as register_terminal

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(app: Flask) -> None:
    pkg_logger = logging.getLogger(__package__)
    pkg_logger.setLevel(str(app.config.get("LOG_LEVEL", "INFO")).upper())

    log_file = app.config.get("LOG_FILE")
    if not log_file:
        return
    log_path = os.path.abspath(log_file)
    for handler in pkg_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
            return
    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    pkg_logger.addHandler(handler)


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    app.config.from_object(settings_module)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    data_files = DataFiles.in_directory(
        app.config["DATA_DIR"],
        employees_file=app.config["EMPLOYEES_FILE"],
        punch_records_file=app.config["PUNCH_RECORDS_FILE"],
    )
    container = build_container(data_files=data_files, clock=app.config.get("CLOCK"))

    if app.config.get("DEBUG"):
        logging.getLogger(__name__).debug(
            "settings=%s employees=%s punches=%s", settings_module, data_files.employees, data_files.punches
        )

    app.extensions["punch_clock"] = container
    register_terminal(app, container)

    return app
