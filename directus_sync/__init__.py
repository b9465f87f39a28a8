import sys
import logging
from flask import Flask
from dotenv import load_dotenv


def build_service(config):
    from .clients.directus import DirectusClient
    from .clients.medusa import MedusaClient
    from .services.sync import ProductSyncService

    directus = DirectusClient(
        config.DIRECTUS["url"],
        token=config.DIRECTUS["token"],
        email=config.DIRECTUS["email"],
        password=config.DIRECTUS["password"],
        collection=config.DIRECTUS["collection"],
    )
    medusa = MedusaClient(config.MEDUSA["url"], api_key=config.MEDUSA["api_key"])
    return ProductSyncService(medusa, directus, threshold_ms=config.SYNC_THRESHOLD_MS)


def create_app(service=None, webhook_secret=None):
    load_dotenv()
    from . import config
    from .utils import logger

    app = Flask(__name__)

    # =========================================================
    # Logging: reuse gunicorn's handlers when served by it
    # =========================================================
    gunicorn_error = logging.getLogger("gunicorn.error")
    app.logger.handlers = list(gunicorn_error.handlers)
    app.logger.setLevel(logging.INFO)

    # no handler level: LOG_LEVEL on the logger decides what gets out
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(logging.Formatter(logger.FORMAT, "%H:%M:%S"))
    app.logger.addHandler(sh)

    logger.configure(config.LOG_LEVEL)

    # =========================================================
    # Sync service, one per app
    # =========================================================
    service = service or build_service(config)
    app.extensions["directus_sync"] = {
        "service": service,
        "webhook_secret": webhook_secret if webhook_secret is not None else config.WEBHOOK_SECRET,
        "collection": config.DIRECTUS["collection"],
    }

    # =========================================================
    # Blueprints
    # =========================================================
    from .routes.medusa_events import bp as medusa_bp
    from .routes.directus_events import bp as directus_bp
    from .routes.custom import bp as custom_bp

    app.register_blueprint(medusa_bp, url_prefix="/medusa")
    app.register_blueprint(directus_bp, url_prefix="/directus")
    app.register_blueprint(custom_bp, url_prefix="/store")

    # =========================================================
    # Health check
    # =========================================================
    @app.get("/health")
    def health():
        app.logger.info("Health check endpoint called")
        return {"ok": True}, 200

    return app
