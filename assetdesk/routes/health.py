from datetime import datetime, timezone

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from assetdesk.models import db
from assetdesk.utils.responses import ok

health_bp = Blueprint("health", __name__)


def database_connected():
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Health check: database unreachable: %s", e)
        return False


@health_bp.route("/health", methods=["GET"])
def health():
    return ok(
        "Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database="connected" if database_connected() else "disconnected",
    )
