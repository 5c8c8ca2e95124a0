from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_STUDENT_ID
from .dashboard.controller import register as register_dashboard
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_STUDENT_ID"] = getattr(settings, "DEFAULT_STUDENT_ID", DEFAULT_STUDENT_ID)
    app.config["DEFAULT_USER_NAME"] = getattr(settings, "DEFAULT_USER_NAME", "Student")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("student-attendance starting (settings=%s)", settings_module)

    if container is None:
        message = getattr(settings, "ENCOURAGEMENT_MESSAGE", None)
        container = build_container(**({"encouragement_message": message} if message else {}))

    register_dashboard(app, container)
    register_sessions(app, container)

    return app
