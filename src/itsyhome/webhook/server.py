"""
Flask webhook exposing the command surface over GET /<action>/<target...>.
"""
import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..actions import ActionEngine, ActionParser
from ..config import ItsyhomeConfig
from ..exceptions import ActionError, CommandParseError

logger = logging.getLogger(__name__)


def success_body(message: Optional[str] = None) -> dict:
    body = {"status": "success"}
    if message:
        body["message"] = message
    return body


def error_body(message: str) -> dict:
    return {"status": "error", "message": message}


def create_app(engine: Optional[ActionEngine], config: ItsyhomeConfig) -> Flask:
    """
    Build the webhook application.

    :param engine: Action engine; None answers every command with 500
    :param config: Config (Pro licence flag)
    :return: Flask app
    """
    app = Flask(__name__)

    @app.after_request
    def allow_any_origin(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.errorhandler(Exception)
    def unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.error(f"Webhook error: {error}", exc_info=True)
        return jsonify(error_body("Internal error")), 500

    def handle(command: str):
        if engine is None:
            return jsonify(error_body("Server not configured")), 500

        if not config.pro_enabled:
            return jsonify(error_body("Pro required")), 403

        if not command.strip("/ "):
            return jsonify(error_body("Empty path")), 400

        try:
            parsed = ActionParser.parse(command)
        except CommandParseError as e:
            logger.warning(f"Webhook parse error for {command!r}: {e}")
            return jsonify(error_body(str(e))), e.http_status

        try:
            outcome = engine.execute(parsed)
        except ActionError as e:
            logger.info(f"Webhook {parsed.action.value} {parsed.target!r} -> {e.http_status}: {e}")
            return jsonify(error_body(e.message)), e.http_status

        if outcome.is_partial:
            return jsonify({
                "status": "partial",
                "message": f"{outcome.succeeded} succeeded, {outcome.failed} failed",
            }), 200

        logger.info(f"Webhook {parsed.action.value} {parsed.target!r} -> ok")
        return jsonify(success_body()), 200

    @app.route("/", methods=["GET"])
    def index():
        """Bare root carries no command."""
        return handle("")

    @app.route("/<path:command>", methods=["GET"])
    def run_command(command: str):
        """Execute a command; Flask has already percent-decoded the path."""
        return handle(command)

    return app
