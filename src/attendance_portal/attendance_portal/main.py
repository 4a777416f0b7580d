from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import build_container
from .core.exceptions import GatewayError
from .gateway.base import PortalGateway
from .inventory.controller import register as register_inventory
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, gateway: Optional[PortalGateway] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    gateway_config = dict(getattr(settings, "GATEWAY_CONFIG", {}))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug("settings=%s gateway=%s", settings_module, gateway_config.get("mode"))

    container = build_container(gateway_config=gateway_config, gateway=gateway)
    atexit.register(container.close)
    try:
        container.refresh()
    except GatewayError as e:
        # Portal still starts; POST /refresh retries once the backend is reachable.
        logger.warning("Initial data load failed: %s", e)

    app.extensions["attendance_portal"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)
    register_inventory(app, container)

    return app
