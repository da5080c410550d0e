from datetime import datetime

from assetdesk.utils.errors import ValidationError

TEAMS = ("Dev", "Support", "Sales")
ASSET_STATUSES = ("Assigned", "In Stock", "Under Repair")
TICKET_STATUSES = ("Open", "In Progress", "Resolved")


def is_blank(value):
    return value is None or value == "" or value == []


def require_fields(data: dict, fields: list):
    """Raise a ValidationError naming every missing field, in the given order."""
    missing = [f for f in fields if is_blank(data.get(f))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def require_str(field: str, value):
    """Text fields must arrive as JSON strings; None passes for optional ones."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"Invalid {field}")
    return value


def require_strings(data: dict, fields):
    for field in fields:
        require_str(field, data.get(field))


def require_choice(field: str, value, choices):
    if value not in choices:
        raise ValidationError(f"Invalid {field}: {value}")
    return value


def optional(data: dict, field: str, default=None):
    value = data.get(field)
    return default if is_blank(value) else value


def parse_date(field: str, value):
    """YYYY-MM-DD, or a full ISO timestamp whose date part is kept."""
    if is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field}: expected YYYY-MM-DD")
    try:
        if len(value) == 10:
            return datetime.strptime(value, "%Y-%m-%d").date()
        # toISOString() output ends in Z
        stamp = value[:-1] + "+00:00" if value.endswith("Z") else value
        return datetime.fromisoformat(stamp).date()
    except ValueError:
        raise ValidationError(f"Invalid {field}: expected YYYY-MM-DD")


def string_list(field: str, value):
    if is_blank(value):
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"Invalid {field}: expected a list of strings")
    return list(value)
