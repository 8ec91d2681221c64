import logging

from flask import Flask
from flasgger import Swagger
from flask_cors import CORS

from .config import get_config
from .errors import register_error_handlers
from models import storage  # DBStorage singleton (scoped_session)
from services import AuthService, SessionStore, UserStore
from utils.security import TokenService

# Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Mflix API",
        "version": "1.0.0",
        "description": "REST API for movies, theaters, comments and user authentication.",
    },
    "basePath": "/",  # blueprints are mounted under /api
    "schemes": ["http", "https"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def build_auth_service(app: Flask) -> AuthService:
    """Wire the auth controller from app config: the signing secret is injected here."""
    tokens = TokenService(
        secret=app.config["JWT_SECRET"],
        algorithm=app.config["JWT_ALGORITHM"],
        access_expires=app.config["JWT_ACCESS_TOKEN_EXPIRES"],
        refresh_expires=app.config["JWT_REFRESH_TOKEN_EXPIRES"],
    )
    return AuthService(users=UserStore(storage), sessions=SessionStore(storage), tokens=tokens)


def create_app(config_name: str | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    config_name picks the config class (dev/testing/prod); defaults to APP_ENV.
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger().setLevel(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Open (or re-open) the database for this app
    storage.reload(app.config["DATABASE_URL"], echo=app.config["SQL_ECHO"])

    app.extensions["auth_service"] = build_auth_service(app)

    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Global error handlers that return the uniform error envelope
    register_error_handlers(app)

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .movies import bp as movies_bp
    from .comments import bp as comments_bp
    from .theaters import bp as theaters_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(movies_bp, url_prefix="/api")
    app.register_blueprint(comments_bp, url_prefix="/api")
    app.register_blueprint(theaters_bp, url_prefix="/api")

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    @app.route("/")
    def root():
        return {
            "message": "Welcome to the Mflix API",
            "docs": "/apidocs/",
            "health": "/api/health",
        }, 200

    app.logger.info("Mflix API created (env=%s)", config_name or app.config["APP_ENV"])
    return app
