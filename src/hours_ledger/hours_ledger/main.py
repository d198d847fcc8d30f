from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .attendance.controller import register as register_attendance
from .container import LedgerConfig, build_container
from .store.table import TabularStore

logger = logging.getLogger(__name__)


def create_app(*, store: Optional[TabularStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    config = LedgerConfig.from_settings(settings)
    logger.info("hours-ledger settings=%s store=%s", settings_module, config.store_backend)

    container = build_container(config=config, store=store)
    app.extensions["hours_ledger"] = container

    register_attendance(app, container)
    register_admin(app, container)

    return app
