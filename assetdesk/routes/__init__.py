from flask import request

from assetdesk.utils.errors import ValidationError

# (method, rule) -> whether a bearer token is required.
# Several mutating endpoints are open on purpose; each row is tested on its own.
ENDPOINT_AUTH = {
    ("POST", "/api/login"): False,
    ("POST", "/api/register"): False,
    ("POST", "/api/users"): False,
    ("GET", "/api/users"): False,
    ("GET", "/api/employees"): True,
    ("PUT", "/api/employees/<int:employee_id>"): False,
    ("DELETE", "/api/employees/<int:employee_id>"): False,
    ("GET", "/api/assets"): True,
    ("POST", "/api/assets"): False,
    ("PUT", "/api/assets/<int:asset_id>"): False,
    ("DELETE", "/api/assets/<int:asset_id>"): False,
    ("GET", "/api/tickets"): False,
    ("POST", "/api/tickets"): False,
    ("PUT", "/api/tickets/<int:ticket_id>"): False,
    ("GET", "/api/health"): False,
    ("GET", "/api/dashboard/stats"): True,
}


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register_blueprints(app):
    from assetdesk.routes.auth import auth_bp
    from assetdesk.routes.users import users_bp
    from assetdesk.routes.employees import employees_bp
    from assetdesk.routes.assets import assets_bp
    from assetdesk.routes.tickets import tickets_bp
    from assetdesk.routes.health import health_bp
    from assetdesk.routes.dashboard import dashboard_bp

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(employees_bp, url_prefix="/api/employees")
    app.register_blueprint(assets_bp, url_prefix="/api/assets")
    app.register_blueprint(tickets_bp, url_prefix="/api/tickets")
    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(dashboard_bp, url_prefix="/api/dashboard")


def check_endpoint_auth(app):
    """Fail fast when a route's token requirement disagrees with ENDPOINT_AUTH."""
    seen = set()
    for rule in app.url_map.iter_rules():
        if not rule.rule.startswith("/api"):
            continue
        view = app.view_functions[rule.endpoint]
        protected = getattr(view, "requires_token", False)
        for method in rule.methods - {"HEAD", "OPTIONS"}:
            key = (method, rule.rule)
            if key not in ENDPOINT_AUTH:
                raise RuntimeError(f"No auth policy declared for {method} {rule.rule}")
            if ENDPOINT_AUTH[key] != protected:
                raise RuntimeError(f"Auth policy mismatch for {method} {rule.rule}")
            seen.add(key)
    missing = set(ENDPOINT_AUTH) - seen
    if missing:
        raise RuntimeError(f"Auth policy declared for unknown routes: {sorted(missing)}")
