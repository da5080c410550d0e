from flask import Flask
from flask_cors import CORS
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from assetdesk.config import Config
from assetdesk.models import db
from assetdesk.routes import check_endpoint_auth, register_blueprints
from assetdesk.utils.email_utils import SMTPMailer
from assetdesk.utils.errors import AppError, DatabaseUnavailableError
from assetdesk.utils.jwt_auth import parse_expiry
from assetdesk.utils.logging_cfg import setup_logging
from assetdesk.utils.responses import fail


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(e):
        return fail(e.message, e.status_code)

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unknown_route(e):
        return fail("Endpoint not found", 404)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception("Unhandled error")
        db.session.rollback()
        return fail("Internal server error", 500)


def create_app(config_object=Config, mailer=None, create_tables=True):
    app = Flask(__name__)
    app.config.from_object(config_object)
    setup_logging(app)

    # bad expiry settings should stop startup, not the first login
    parse_expiry(app.config["JWT_EXPIRY"])

    CORS(app, resources={r"/api/*": {
        "origins": app.config["FRONTEND_URL"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "supports_credentials": True,
    }})
    db.init_app(app)
    app.extensions["mailer"] = mailer or SMTPMailer.from_config(app.config)

    register_blueprints(app)
    register_error_handlers(app)
    check_endpoint_auth(app)

    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            app.logger.info("Connected to database %s", db.engine.url.render_as_string(hide_password=True))
            if create_tables:
                db.create_all()
        except SQLAlchemyError as e:
            app.logger.error("Database connection failed: %s", e)
            raise DatabaseUnavailableError(str(e)) from e
        finally:
            db.session.remove()
    return app
