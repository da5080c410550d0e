from flask import Blueprint, g

from assetdesk.routes import json_body
from assetdesk.services import assets as asset_service
from assetdesk.utils.decorators import is_admin, token_required
from assetdesk.utils.responses import ok
from assetdesk.utils.scoping import resolve_company_scope
from assetdesk.utils.validators import (
    ASSET_STATUSES, TEAMS, optional, parse_date, require_choice, require_fields, require_strings,
    string_list,
)

assets_bp = Blueprint("assets", __name__)

REQUIRED = ["name", "tagNo", "company"]
OPTIONAL = ["mobileNumber", "os", "model", "ram", "drive", "serialNumber", "condition", "assignedTo"]


def _asset_values(data):
    """Validate a create/update body; every optional field ends up explicit."""
    require_fields(data, REQUIRED)
    require_strings(data, REQUIRED + OPTIONAL + ["team", "status"])

    values = {field: data[field] for field in REQUIRED}
    for field in OPTIONAL:
        values[field] = optional(data, field)

    team = optional(data, "team")
    values["team"] = require_choice("team", team, TEAMS) if team else None
    values["status"] = require_choice("status", optional(data, "status", "In Stock"), ASSET_STATUSES)
    values["purchaseDate"] = parse_date("purchaseDate", data.get("purchaseDate"))
    values["peripherals"] = string_list("peripherals", data.get("peripherals"))
    return values


@assets_bp.route("", methods=["GET"])
@token_required
def list_assets():
    scope = resolve_company_scope(g.user.get("company"), is_admin=is_admin())
    assets = asset_service.list_assets(scope)
    return ok(assets=[a.to_dict() for a in assets])


@assets_bp.route("", methods=["POST"])
def create_asset():
    values = _asset_values(json_body())
    asset_id = asset_service.create_asset(values)
    return ok("Asset added successfully", 201, assetId=asset_id)


@assets_bp.route("/<int:asset_id>", methods=["PUT"])
def update_asset(asset_id):
    values = _asset_values(json_body())
    asset_service.update_asset(asset_id, values)
    return ok("Asset updated successfully")


@assets_bp.route("/<int:asset_id>", methods=["DELETE"])
def delete_asset(asset_id):
    asset_service.delete_asset(asset_id)
    return ok("Asset deleted successfully")
