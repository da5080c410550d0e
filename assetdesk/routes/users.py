from flask import Blueprint, current_app, request

from assetdesk.routes import json_body
from assetdesk.services import employees as employee_service
from assetdesk.services import users as user_service
from assetdesk.utils.responses import fail, ok
from assetdesk.utils.scoping import resolve_company_scope
from assetdesk.utils.validators import TEAMS, require_choice, require_fields, require_strings

users_bp = Blueprint("users", __name__)

EMPLOYEE_FIELDS = ["username", "empId", "email", "password", "company", "role", "team"]


@users_bp.route("", methods=["POST"])
def create_employee():
    data = json_body()
    require_fields(data, EMPLOYEE_FIELDS)
    require_strings(data, EMPLOYEE_FIELDS)
    if data["role"] != "employee":
        return fail("Invalid role", 400)
    require_choice("team", data["team"], TEAMS)

    user_id = employee_service.create_employee(
        username=data["username"],
        emp_id=data["empId"],
        email=data["email"],
        password=data["password"],
        company=data["company"],
        team=data["team"],
    )
    current_app.logger.info("Employee %s added (id=%s)", data["empId"], user_id)
    return ok("Employee added successfully", 201, userId=user_id)


@users_bp.route("", methods=["GET"])
def list_users():
    """Admins and employees in one list; ?role=admin lifts the company filter."""
    scope = resolve_company_scope(
        request.args.get("company"),
        is_admin=request.args.get("role") == "admin",
    )
    users = [u.to_dict() for u in user_service.list_admins(scope)]
    users += [e.to_dict() for e in employee_service.list_employees(scope)]
    return ok(users=users)
