from flask import Blueprint, current_app

from assetdesk.routes import json_body
from assetdesk.services import tickets as ticket_service
from assetdesk.services.notifications import notify_ticket_created
from assetdesk.utils.responses import ok
from assetdesk.utils.validators import (
    TICKET_STATUSES, optional, require_choice, require_fields, require_strings,
)

tickets_bp = Blueprint("tickets", __name__)


@tickets_bp.route("", methods=["GET"])
def list_tickets():
    tickets = ticket_service.list_tickets()
    return ok(tickets=ticket_service.describe_tickets(tickets))


@tickets_bp.route("", methods=["POST"])
def create_ticket():
    data = dict(json_body())
    # older clients send the text as issue_description
    if not data.get("description") and data.get("issue_description"):
        data["description"] = data["issue_description"]

    require_fields(data, ["empId", "serialNo", "description"])
    require_strings(data, ["empId", "serialNo", "description", "status"])
    status = require_choice("status", optional(data, "status", "Open"), TICKET_STATUSES)

    ticket_id = ticket_service.create_ticket(data["empId"], data["serialNo"], data["description"], status)
    current_app.logger.info("Ticket #%s raised by %s for %s", ticket_id, data["empId"], data["serialNo"])

    # The ticket is committed; mail problems only change the message
    sent = notify_ticket_created(
        current_app.extensions["mailer"],
        ticket_id, data["empId"], data["serialNo"], data["description"], status,
    )
    if sent:
        message = "Ticket created successfully and emails sent"
    else:
        message = "Ticket created but failed to send email"
    return ok(message, 201, ticketId=ticket_id)


@tickets_bp.route("/<int:ticket_id>", methods=["PUT"])
def update_ticket(ticket_id):
    data = json_body()
    require_fields(data, ["status"])
    require_choice("status", data["status"], TICKET_STATUSES)

    ticket_service.update_ticket_status(ticket_id, data["status"])
    return ok("Ticket updated successfully")
