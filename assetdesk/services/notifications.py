"""Best-effort mail fan-out after a ticket has been stored."""
from html import escape

from flask import current_app

from assetdesk.services import employees as employee_service
from assetdesk.services import users as user_service
from assetdesk.utils.errors import AppError


def _esc(value):
    return escape(str(value))


def _confirmation_body(ticket_id, name, serial_no, description, status):
    return f"""
    <h3>Your Ticket has been submitted successfully</h3>
    <p>Hi {_esc(name)},</p>
    <p>Your ticket has been raised successfully. Below are the details:</p>
    <p><strong>Ticket ID:</strong> {ticket_id}</p>
    <p><strong>Asset Serial:</strong> {_esc(serial_no)}</p>
    <p><strong>Description:</strong> {_esc(description)}</p>
    <p><strong>Status:</strong> {_esc(status)}</p>
    <p>We will notify you when there are updates.</p>
    """


def _admin_body(ticket_id, name, email, serial_no, description, status):
    return f"""
    <h3>New Ticket Raised</h3>
    <p><strong>Ticket ID:</strong> {ticket_id}</p>
    <p><strong>Raised By:</strong> {_esc(name)} ({_esc(email or 'N/A')})</p>
    <p><strong>Asset Serial:</strong> {_esc(serial_no)}</p>
    <p><strong>Description:</strong> {_esc(description)}</p>
    <p><strong>Status:</strong> {_esc(status)}</p>
    """


def notify_ticket_created(mailer, ticket_id, emp_id, serial_no, description, status) -> bool:
    """
    Mail the reporter a confirmation and all admins a notification.

    Returns True only when every attempted send went through. Lookup or
    transport failures are logged and reported as False; nothing raises.
    """
    log = current_app.logger
    try:
        employee = employee_service.find_contact(emp_id)
        admin_emails = user_service.list_admin_emails()
    except AppError as e:
        log.error("Ticket #%s: recipient lookup failed: %s", ticket_id, e.message)
        return False

    name = (employee or {}).get("username") or emp_id
    email = (employee or {}).get("email")
    delivered = True

    try:
        if email:
            delivered &= bool(mailer.send(
                email,
                f"Ticket Submitted (#{ticket_id})",
                _confirmation_body(ticket_id, name, serial_no, description, status),
            ))
        if admin_emails:
            delivered &= bool(mailer.send(
                admin_emails,
                f"New Ticket Raised (#{ticket_id})",
                _admin_body(ticket_id, name, email, serial_no, description, status),
            ))
    except Exception:
        log.exception("Ticket #%s: mailer raised", ticket_id)
        return False

    if not delivered:
        log.warning("Ticket #%s: one or more notification emails were not delivered", ticket_id)
    return delivered
