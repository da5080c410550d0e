import json

from . import db


def load_peripherals(raw):
    """Stored JSON text -> list of strings; anything unreadable becomes []."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return []
    return value if isinstance(value, list) else []


def dump_peripherals(items):
    return json.dumps(list(items or []))


class Asset(db.Model):
    __tablename__ = 'assets'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    tag_no = db.Column('tagNo', db.String(100), unique=True, nullable=False)
    company = db.Column(db.String(100), nullable=False, index=True)
    team = db.Column(db.String(20))
    mobile_number = db.Column(db.String(30))
    os = db.Column(db.String(100))
    model = db.Column(db.String(120))
    ram = db.Column(db.String(50))
    drive = db.Column(db.String(100))
    serial_number = db.Column('serialNumber', db.String(150))
    issue_condition = db.Column(db.String(100))
    status = db.Column(db.String(20), nullable=False, default='In Stock')  # Assigned / In Stock / Under Repair
    purchase_date = db.Column('dop', db.Date)
    other_peripherals = db.Column(db.Text)  # JSON list, order preserved
    assigned_user_id = db.Column(db.String(50))  # Employee.empId, not enforced

    @property
    def peripherals(self):
        return load_peripherals(self.other_peripherals)

    @peripherals.setter
    def peripherals(self, items):
        self.other_peripherals = dump_peripherals(items)

    def to_dict(self):
        """Raw column keys plus the camelCase names the forms post back."""
        purchase_date = self.purchase_date.isoformat() if self.purchase_date else None
        return {
            "mobile_number": self.mobile_number,
            "issue_condition": self.issue_condition,
            "dop": purchase_date,
            "assigned_user_id": self.assigned_user_id,
            "other_peripherals": self.other_peripherals,
            "id": self.id,
            "name": self.name,
            "tagNo": self.tag_no,
            "company": self.company,
            "team": self.team,
            "mobileNumber": self.mobile_number,
            "os": self.os,
            "model": self.model,
            "ram": self.ram,
            "drive": self.drive,
            "serialNumber": self.serial_number,
            "condition": self.issue_condition,
            "status": self.status,
            "purchaseDate": purchase_date,
            "peripherals": self.peripherals,
            "assignedTo": self.assigned_user_id,
        }
