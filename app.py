import logging
import os
from datetime import datetime

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from errors import CityAlreadyExists, CityNotFound, ValidationFailure
from fallback_catalog import build_fallback
from models import db
from schemas import parse_weather_request, require_city
from store import RecordStore, sample_records
from weather_service import ResolutionService

HEALTH_MESSAGE = "Weather service is running"

# Builds the {timestamp, message, status} body every failure is reported with.
def _error_response(status, message):
    body = {
        "timestamp": datetime.now().isoformat(),
        "message": message,
        "status": status,
    }
    return jsonify(body), status

# Returns the service wired into the running app.
def get_weather_service(app) -> ResolutionService:
    return app.extensions["weather_service"]

# App factory: reads configuration, wires the store, fallback and service, and registers routes.
def create_app(test_config=None):
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret")
    app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get("DATABASE_URL", "sqlite://")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["WEATHER_SEED_SAMPLES"] = os.environ.get("WEATHER_SEED_SAMPLES", "1") == "1"
    app.config["WEATHER_FALLBACK"] = os.environ.get("WEATHER_FALLBACK", "static")
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO").upper()
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)

    store = RecordStore(db)
    service = ResolutionService(store=store, fallback=build_fallback(app.config["WEATHER_FALLBACK"]))
    app.extensions["weather_service"] = service

    with app.app_context():
        db.create_all()
        if app.config["WEATHER_SEED_SAMPLES"]:
            store.seed(sample_records(service.id_generator))

    @app.route("/weather", methods=["GET"])
    def get_weather():
        city = require_city(request.args.get("city"))
        report = service.read(city)
        return jsonify(report.to_dict()), 200

    @app.route("/weather", methods=["POST"])
    def add_weather():
        weather_request = parse_weather_request(request.get_json(silent=True))
        service.create(weather_request)
        return jsonify({"success": True}), 201

    # Full replacement: every field of the stored record is overwritten.
    @app.route("/weather", methods=["PUT"])
    def update_weather():
        weather_request = parse_weather_request(request.get_json(silent=True))
        report = service.replace(weather_request)
        return jsonify(report.to_dict()), 200

    @app.route("/weather", methods=["DELETE"])
    def delete_weather():
        city = require_city(request.args.get("city"))
        service.remove(city)
        return "", 204

    @app.route("/weather/health", methods=["GET"])
    def health():
        return HEALTH_MESSAGE, 200

    # Error translation; the only place failures become status codes.
    @app.errorhandler(CityNotFound)
    def handle_not_found(exc):
        app.logger.error(str(exc))
        return _error_response(404, str(exc))

    @app.errorhandler(CityAlreadyExists)
    def handle_already_exists(exc):
        app.logger.error(str(exc))
        return _error_response(409, str(exc))

    @app.errorhandler(ValidationFailure)
    def handle_validation(exc):
        app.logger.error(str(exc))
        return _error_response(400, str(exc))

    @app.errorhandler(HTTPException)
    def handle_http(exc):
        app.logger.error(exc.description)
        return _error_response(exc.code, exc.description)

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        app.logger.exception("Unexpected failure")
        return _error_response(500, str(exc))

    return app

if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    app = create_app()
    app.run(debug=True)
