from assetdesk.models import db, Asset, Employee, Ticket
from assetdesk.services.persistence import read
from assetdesk.utils.validators import ASSET_STATUSES, TEAMS, TICKET_STATUSES


def _counts(column, choices, *filters):
    query = db.session.query(column, db.func.count()).filter(*filters).group_by(column)
    counts = {c: 0 for c in choices}
    total = 0
    for value, count in read(query.all):
        counts[value] = count
        total += count
    counts["Total"] = total
    return counts


def summary(scope=None, emp_id=None):
    """
    Status counts for the dashboard.

    scope limits assets and employees to one company; tickets carry no
    company, so they are limited to the reporter's empId instead when given.
    """
    asset_filters = [Asset.company == scope] if scope else []
    employee_filters = [Employee.company == scope] if scope else []
    ticket_filters = [Ticket.emp_id == emp_id] if emp_id is not None else []

    return {
        "assets": _counts(Asset.status, ASSET_STATUSES, *asset_filters),
        "tickets": _counts(Ticket.status, TICKET_STATUSES, *ticket_filters),
        "employees": _counts(Employee.team, TEAMS, *employee_filters),
    }
