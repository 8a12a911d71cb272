from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .container import build_container
from .core.constants import DEFAULT_CHECKIN_GRACE_MINUTES
from .core.exceptions import DomainError
from .events.controller import register as register_events
from .insights.controller import register as register_insights
from .storage.seed import seed_demo_data
from .users.controller import register as register_users


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if e.status_code >= 500:
            app.logger.error("domain error: %s", e)
        return jsonify({"message": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("unhandled error: %s", e)
        if app.config.get("DEBUG"):
            return jsonify({"message": f"Internal server error: {e}"}), 500
        return jsonify({"message": "Internal server error"}), 500


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log_level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(log_level)

    container = build_container(
        grace_minutes=int(getattr(settings, "CHECKIN_GRACE_MINUTES", DEFAULT_CHECKIN_GRACE_MINUTES)),
    )
    app.extensions["rollmate"] = container

    if bool(getattr(settings, "AUTO_SEED", False)):
        counts = seed_demo_data(container)
        app.logger.info("demo seed ready: %s", counts)

    _register_error_handlers(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "settings": settings_module, "rows": container.store.counts()})

    register_users(app, container)
    register_classes(app, container)
    register_events(app, container)
    register_attendance(app, container)
    register_insights(app, container)

    app.logger.info("RollMate ready (settings=%s)", settings_module)
    return app
