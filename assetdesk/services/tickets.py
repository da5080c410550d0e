from assetdesk.models import db, Ticket
from assetdesk.services import assets as asset_service
from assetdesk.services import employees as employee_service
from assetdesk.services.persistence import read, write
from assetdesk.utils.errors import NotFoundError

UNKNOWN_EMPLOYEE = "Unknown"
UNKNOWN_ASSET = "Unknown Asset"


def create_ticket(emp_id, serial_no, description, status="Open"):
    def _insert():
        ticket = Ticket(emp_id=emp_id, serial_no=serial_no, description=description, status=status)
        db.session.add(ticket)
        db.session.flush()
        return ticket.id

    return write(_insert)


def list_tickets():
    return read(lambda: Ticket.query.order_by(Ticket.id).all())


def describe_tickets(tickets):
    """Ticket dicts with the reporter and asset resolved for display."""
    names = employee_service.usernames_by_emp_id(t.emp_id for t in tickets)
    asset_names = asset_service.names_by_serial(t.serial_no for t in tickets)
    out = []
    for t in tickets:
        row = t.to_dict()
        row["reportedBy"] = names.get(t.emp_id) or UNKNOWN_EMPLOYEE
        row["assetName"] = asset_names.get(t.serial_no) or UNKNOWN_ASSET
        out.append(row)
    return out


def update_ticket_status(ticket_id, status):
    count = write(lambda: Ticket.query.filter(Ticket.id == ticket_id)
                  .update({Ticket.status: status}, synchronize_session=False))
    if count == 0:
        raise NotFoundError("Ticket not found")
