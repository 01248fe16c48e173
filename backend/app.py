"""
Flask Application Factory - Board governance request contracts

Every inbound payload (REST body, query string, realtime event) is checked
against a registered contract before it reaches a handler.

Features:
- Contract catalog loaded at startup (registers on import)
- Contract introspection and dry-run validation under /api/contracts
- Request ID correlation, request logging, standard error envelopes
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from config import Config


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def _check_strict_contracts(names, logger) -> list:
    """Warn about CONTRACT_STRICT_CONTRACTS entries that match no contract."""
    from api.contracts import get_contract

    unknown = [name for name in names if get_contract(name) is None]
    if unknown:
        logger.warning(
            f"CONTRACT_STRICT_CONTRACTS names unknown contract(s): {', '.join(unknown)}",
            extra={"event": "unknown_strict_contracts", "contracts": unknown},
        )
    return unknown


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    _configure_logging(app.config.get('LOG_LEVEL', 'INFO'))
    logger = logging.getLogger('api')

    # Flask-CORS handles all CORS headers, error responses included
    CORS(app,
         resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', ['*'])}},
         methods=["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE"],
         allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
         expose_headers=["X-Request-ID", "X-API-Contract-Version"],
         supports_credentials=False)

    # === API CONTRACT MIDDLEWARE ===
    # Request ID injection for request correlation and debugging
    from api.middleware import setup_request_id_middleware
    setup_request_id_middleware(app)

    # Request usage logging (sampling + watchlist + rejected payloads)
    from api.middleware import setup_request_logging_middleware
    setup_request_logging_middleware(app)

    # Standard error envelope for HTTP errors, ValidationFailed and 500s
    from api.middleware import setup_error_handlers
    setup_error_handlers(app)

    # Load contract schemas (registers contracts on import)
    from api.contracts import schemas  # noqa: F401
    from api.contracts import list_contracts
    logger.info(
        f"API contracts loaded: {len(list_contracts())} (mode={app.config.get('CONTRACT_MODE')})"
    )
    _check_strict_contracts(app.config.get('CONTRACT_STRICT_CONTRACTS', []), logger)

    # Contract introspection routes
    from routes.contracts import contracts_bp
    app.register_blueprint(contracts_bp, url_prefix='/api/contracts')

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "contracts": len(list_contracts())})

    return app


def run_app():
    """Main entry point for local development - starts server with Flask's dev server."""
    app = create_app()
    app.run(debug=app.config.get('DEBUG', False), host="0.0.0.0", port=5000)


if __name__ == "__main__":
    run_app()
