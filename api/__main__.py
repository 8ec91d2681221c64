"""
Development server for the Mflix API: python -m api

Configuration comes from APP_ENV (see api.config.get_config). Run a WSGI
server such as gunicorn against api:create_app() in production.
"""
import logging
import os

from . import create_app

logger = logging.getLogger("api")


def env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def main():
    app = create_app()
    host = os.getenv("FLASK_RUN_HOST", "127.0.0.1")
    port = int(os.getenv("FLASK_RUN_PORT", "8000"))
    debug = env_flag(os.getenv("FLASK_DEBUG", str(app.config.get("DEBUG", False))))
    logger.info("Mflix API listening on http://%s:%d (debug=%s)", host, port, debug)
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
