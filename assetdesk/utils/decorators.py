from functools import wraps

from flask import current_app, g, request

from assetdesk.utils.errors import ForbiddenError, UnauthenticatedError
from assetdesk.utils.jwt_auth import verify_token


def bearer_token(auth_header):
    """Token part of an 'Authorization: Bearer <token>' header, or None."""
    parts = auth_header.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def token_required(f):
    """Reject with 401 when no credential is sent, 403 when it does not verify."""
    @wraps(f)
    def decorated(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            raise UnauthenticatedError("No token provided")

        claims = verify_token(bearer_token(auth_header))
        if claims is None:
            current_app.logger.info("Rejected token on %s %s", request.method, request.path)
            raise ForbiddenError("Invalid or expired token")

        g.user = claims
        return f(*args, **kwargs)
    decorated.requires_token = True
    return decorated


def current_user():
    return g.get("user")


def is_admin(user=None):
    user = user if user is not None else current_user()
    return bool(user) and user.get("role") == "admin"
