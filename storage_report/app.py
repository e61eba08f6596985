import locale
import logging

from flask import Flask
from flask_cors import CORS

from storage_report.api import api
from storage_report.settings import settings

logging.basicConfig(
    level=settings.logging_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

try:
    # node names are ordered with the environment's collation
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error as error:
    logging.getLogger(__name__).warning("Keeping the C collation locale: %s", error)


def create_app() -> Flask:
    app = Flask(__name__)

    CORS(app, origins=settings.cors_origin_list)
    app.config["CORS_HEADERS"] = "Content-Type"

    app.register_blueprint(api)
    return app


app = create_app()
