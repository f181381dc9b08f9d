# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from byteblog.infrastructure.container import Container
from byteblog.infrastructure.db import init_db
from byteblog.shared.config import load_config
from byteblog.shared.logging import logger, setup_logging
from byteblog.shared.middleware.error_handler import configure_error_handling
from byteblog.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or Container(load_config())
    config = container.config

    setup_logging(
        debug_mode=config.debug_logging,
        cookie_names=(config.security.session_cookie_name,),
    )
    init_db(config.database)

    app = Flask(__name__)
    app.extensions["byteblog.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(
        f"Flask app initialized (sessions={config.security.session_backend}, "
        f"lifetime={config.security.session_lifetime}s)"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(Container(config))
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
