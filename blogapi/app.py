# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from blogapi.container import Container
from blogapi.infrastructure.db import init_db
from blogapi.shared.config import AppConfig, load_config
from blogapi.shared.logging import logger, setup_logging
from blogapi.shared.middleware.error_handler import configure_error_handling
from blogapi.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    init_db(container.engine)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["blogapi.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    CORS(app, resources={r"/*": {"origins": config.security.allowed_origins}})

    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
