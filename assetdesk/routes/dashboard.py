from flask import Blueprint, g

from assetdesk.services import dashboard as dashboard_service
from assetdesk.services import employees as employee_service
from assetdesk.utils.decorators import is_admin, token_required
from assetdesk.utils.responses import ok
from assetdesk.utils.scoping import resolve_company_scope

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/stats", methods=["GET"])
@token_required
def stats():
    admin = is_admin()
    scope = resolve_company_scope(g.user.get("company"), is_admin=admin)
    # employees only count their own tickets
    emp_id = None if admin else (employee_service.emp_id_for(g.user.get("id")) or "")
    return ok(stats=dashboard_service.summary(scope, emp_id=emp_id))
