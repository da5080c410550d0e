import logging
import sys

from assetdesk import create_app
from assetdesk.models import db
from assetdesk.utils.errors import DatabaseUnavailableError


def main():
    try:
        app = create_app()
    except DatabaseUnavailableError:
        logging.getLogger("assetdesk").error("Database connection failed, not starting")
        sys.exit(1)

    app.logger.info("Server running on port %s", app.config["PORT"])
    app.logger.info("Frontend URL: %s", app.config["FRONTEND_URL"])
    try:
        app.run(host="0.0.0.0", port=app.config["PORT"])
    finally:
        with app.app_context():
            db.engine.dispose()
        app.logger.info("Database connections closed")


if __name__ == "__main__":
    main()
