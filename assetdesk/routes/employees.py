from flask import Blueprint, g

from assetdesk.routes import json_body
from assetdesk.services import employees as employee_service
from assetdesk.utils.decorators import is_admin, token_required
from assetdesk.utils.responses import fail, ok
from assetdesk.utils.scoping import resolve_company_scope
from assetdesk.utils.validators import TEAMS, require_choice, require_fields, require_strings

employees_bp = Blueprint("employees", __name__)

EDITABLE_FIELDS = ["username", "empId", "email", "company", "role", "team"]


@employees_bp.route("", methods=["GET"])
@token_required
def list_employees():
    scope = resolve_company_scope(g.user.get("company"), is_admin=is_admin())
    employees = employee_service.list_employees(scope)
    return ok(employees=[e.to_dict() for e in employees])


@employees_bp.route("/<int:employee_id>", methods=["PUT"])
def update_employee(employee_id):
    data = json_body()
    require_fields(data, EDITABLE_FIELDS)
    require_strings(data, EDITABLE_FIELDS)
    if data["role"] != "employee":
        return fail("Invalid role", 400)
    require_choice("team", data["team"], TEAMS)

    employee_service.update_employee(employee_id, {
        "username": data["username"],
        "emp_id": data["empId"],
        "email": data["email"],
        "company": data["company"],
        "role": data["role"],
        "team": data["team"],
    })
    return ok("Employee updated successfully")


@employees_bp.route("/<int:employee_id>", methods=["DELETE"])
def delete_employee(employee_id):
    employee_service.delete_employee(employee_id)
    return ok("Employee deleted successfully")
