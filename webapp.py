import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from notion_client import Client

from errors import DomainNotAuthorized, GatewayError, UpstreamOther
from notion_records import RecordForwarder
from origins import cors_origin_patterns, is_allowed, request_hostname
from submission import build_submission

logger = logging.getLogger(__name__)


def build_forwarder(config):
    options = {"auth": config.notion_token}
    if config.notion_timeout_ms:
        options["timeout_ms"] = config.notion_timeout_ms
    return RecordForwarder(Client(**options), config.notion_database_id,
                           config.property_names)


def create_app(config, forwarder=None):
    # ─── App setup ───────────────────────────────────────────────────────────
    app = Flask(__name__)
    app.config["GATEWAY"] = config
    CORS(app, origins=cors_origin_patterns(config.allowed_domains),
         supports_credentials=True)

    if forwarder is None:
        forwarder = build_forwarder(config)

    # ─── Errors as JSON ──────────────────────────────────────────────────────
    @app.errorhandler(GatewayError)
    def gateway_error(err):
        return jsonify({"success": False, "error": err.message}), err.status_code

    @app.errorhandler(404)
    def not_found(err):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(err):
        resp = jsonify({"success": False, "error": "Method not allowed"})
        allow = getattr(err, "valid_methods", None)
        if allow:
            resp.headers["Allow"] = ", ".join(allow)
        return resp, 405

    @app.errorhandler(500)
    def internal_error(err):
        return jsonify({"success": False, "error": UpstreamOther.default_message}), 500

    # ─── POST /gpu-requests (and legacy /submit-form) ────────────────────────
    @app.route("/gpu-requests", methods=["POST"])
    @app.route("/submit-form", methods=["POST"])
    def submit():
        origin = request.headers.get("Origin")
        referer = request.headers.get("Referer")
        if not is_allowed(origin, referer, config.allowed_domains):
            logger.warning("Rejected submission from domain %r",
                           request_hostname(origin, referer))
            raise DomainNotAuthorized()

        if request.is_json:
            data = request.get_json(silent=True)
        else:
            data = request.form.to_dict()
        if not isinstance(data, dict):
            data = {}

        page_id = forwarder.create(build_submission(data))
        return jsonify({
            "success": True,
            "message": "Form submitted successfully",
            "notionPageId": page_id,
        }), 200

    # ─── Health check ────────────────────────────────────────────────────────
    @app.route("/health")
    def health():
        return jsonify({"status": "Server is running"}), 200

    return app
