# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from reviewhub.infrastructure.container import Container
from reviewhub.infrastructure.db import init_db
from reviewhub.shared.config import AppConfig, load_config
from reviewhub.shared.logging import logger, setup_logging
from reviewhub.shared.middleware.error_handler import configure_error_handling
from reviewhub.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)

    setup_logging(config.log_level)
    init_db()

    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    configure_error_handling(app, config)
    configure_request_logging(app, config)

    origins = config.security.allowed_origins
    CORS(app, resources={r"/api/*": {"origins": origins}})

    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.restaurants_controller.as_blueprint())
    app.register_blueprint(container.reviews_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    create_app().run(host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
