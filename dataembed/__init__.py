import os
import logging
from flask import Flask
from werkzeug.routing import Map
from config import config

logger = logging.getLogger(__name__)

__version__ = "1.0.0"


class SourcePathMap(Map):
    """URL map that keeps consecutive slashes, so /https://host routes as-is."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("merge_slashes", False)
        super().__init__(*args, **kwargs)


class DataEmbedFlask(Flask):
    url_map_class = SourcePathMap


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "production")

    # Ensure config_name is a known configuration
    if not isinstance(config_name, str) or config_name not in config:
        config_name = "production"

    app = DataEmbedFlask(__name__)

    # Load config
    app.config.from_object(config[config_name])
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))
    logger.info("Creating app with config: %s", config_name)

    # Initialize the embed service
    from dataembed.services import EmbedService

    app.extensions["embed_service"] = EmbedService(
        enabled_matchers=app.config.get("ENABLED_MATCHERS")
    )
    logger.info(
        "Enabled matchers: %s",
        ", ".join(app.extensions["embed_service"].enabled_matchers),
    )

    # Register blueprints
    from dataembed.routes import main as main_blueprint

    app.register_blueprint(main_blueprint)

    # Register global error handlers
    from dataembed.error_handlers import register_error_handlers

    register_error_handlers(app)

    return app
