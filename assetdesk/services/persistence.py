from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from assetdesk.models import db
from assetdesk.utils.errors import DatabaseError, DuplicateEntryError

MYSQL_DUP_ENTRY = 1062
_DUPLICATE_MARKERS = ("UNIQUE constraint failed", "Duplicate entry", "duplicate key value")

DUPLICATE_USER = "Username or email already exists"


def is_duplicate(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if getattr(orig, "errno", None) == MYSQL_DUP_ENTRY:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUP_ENTRY:
        return True
    text = str(orig if orig is not None else exc)
    return any(marker in text for marker in _DUPLICATE_MARKERS)


def write(fn, duplicate_message=DUPLICATE_USER):
    """
    Run a mutating statement and commit it.

    Uniqueness violations become DuplicateEntryError, every other driver
    failure becomes DatabaseError; the session is rolled back either way.
    """
    try:
        result = fn()
        db.session.commit()
        return result
    except IntegrityError as e:
        db.session.rollback()
        if is_duplicate(e):
            current_app.logger.info("Duplicate entry rejected: %s", e.orig)
            raise DuplicateEntryError(duplicate_message)
        current_app.logger.error("Integrity error: %s", e.orig)
        raise DatabaseError("Database error")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Database error: %s", e)
        raise DatabaseError("Database error")


def read(fn):
    try:
        return fn()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Database error: %s", e)
        raise DatabaseError("Database error")
