from assetdesk.models import db, Asset
from assetdesk.models.asset import dump_peripherals
from assetdesk.services.persistence import read, write
from assetdesk.utils.errors import NotFoundError
from assetdesk.utils.scoping import apply_company_scope

DUPLICATE_TAG = "Tag number already exists"

# request field -> model attribute
ASSET_FIELDS = {
    "name": "name",
    "tagNo": "tag_no",
    "company": "company",
    "team": "team",
    "mobileNumber": "mobile_number",
    "os": "os",
    "model": "model",
    "ram": "ram",
    "drive": "drive",
    "serialNumber": "serial_number",
    "condition": "issue_condition",
    "status": "status",
    "purchaseDate": "purchase_date",
    "assignedTo": "assigned_user_id",
}


def _columns(values: dict):
    row = {attr: values.get(field) for field, attr in ASSET_FIELDS.items()}
    row["other_peripherals"] = dump_peripherals(values.get("peripherals"))
    return row


def create_asset(values: dict):
    def _insert():
        asset = Asset(**_columns(values))
        db.session.add(asset)
        db.session.flush()
        return asset.id

    return write(_insert, duplicate_message=DUPLICATE_TAG)


def list_assets(scope=None):
    query = apply_company_scope(Asset.query, Asset.company, scope)
    return read(lambda: query.order_by(Asset.id).all())


def update_asset(asset_id, values: dict):
    row = {getattr(Asset, attr): value for attr, value in _columns(values).items()}
    count = write(lambda: Asset.query.filter(Asset.id == asset_id)
                  .update(row, synchronize_session=False),
                  duplicate_message=DUPLICATE_TAG)
    if count == 0:
        raise NotFoundError("Asset not found")


def delete_asset(asset_id):
    count = write(lambda: Asset.query.filter(Asset.id == asset_id)
                  .delete(synchronize_session=False))
    if count == 0:
        raise NotFoundError("Asset not found")


def names_by_serial(serials):
    serials = {s for s in serials if s}
    if not serials:
        return {}
    rows = read(lambda: db.session.query(Asset.serial_number, Asset.name)
                .filter(Asset.serial_number.in_(serials)).all())
    return {serial: name for serial, name in rows}
