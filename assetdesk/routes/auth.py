from flask import Blueprint, current_app

from assetdesk.routes import json_body
from assetdesk.services import employees as employee_service
from assetdesk.services import users as user_service
from assetdesk.utils.jwt_auth import issue_token
from assetdesk.utils.responses import fail, ok
from assetdesk.utils.validators import optional, require_fields, require_strings

auth_bp = Blueprint("auth", __name__)


def _user_payload(user):
    """Normalized user object returned to the frontend after login."""
    team = getattr(user, "team", None) or None
    return {
        "id": user.id,
        "username": user.username,
        "empId": getattr(user, "emp_id", None) or user.username,
        "role": user.role,
        "company": user.company,
        "team": team,
        "email": getattr(user, "email", None) or None,
    }


# -----------------------------
# LOGIN
# -----------------------------
@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    require_fields(data, ["email", "password", "role", "company"])
    require_strings(data, ["email", "password", "role", "company", "team"])

    role = data["role"]
    if role == "admin":
        user = user_service.find_admin_by_credentials(data["email"], data["password"])
    elif role == "employee":
        user = employee_service.find_employee_by_credentials(
            data["email"], data["password"], data["company"], team=optional(data, "team"))
    else:
        return fail("Invalid role", 400)

    if user is None:
        current_app.logger.info("Failed %s login for %s", role, data["email"])
        return fail("Invalid credentials", 401)

    payload = _user_payload(user)
    token = issue_token({
        "id": payload["id"],
        "username": payload["username"],
        "role": payload["role"],
        "company": payload["company"],
        "team": payload["team"],
    })
    return ok(token=token, user=payload)


# -----------------------------
# REGISTER ADMIN
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()
    require_fields(data, ["username", "password", "role", "company"])
    require_strings(data, ["username", "password", "role", "company", "email"])
    if data["role"] != "admin":
        return fail("Invalid role", 400)

    user_id = user_service.create_admin(
        username=data["username"],
        password=data["password"],
        company=data["company"],
        email=optional(data, "email"),
    )
    current_app.logger.info("Registered admin %s (id=%s)", data["username"], user_id)
    return ok("User registered successfully", 201, userId=user_id)
