import pytest

from assetdesk.models import AdminUser, Employee, db
from assetdesk.routes import ENDPOINT_AUTH
from assetdesk.services import employees as employee_service
from assetdesk.services import users as user_service
from assetdesk.utils.jwt_auth import verify_token
from conftest import login


def test_admin_login_returns_token_with_identity(client, app, admin):
    resp = login(client, admin["email"], admin["password"], "admin", "MTPL")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["success"] is True
    assert body["user"] == {
        "id": admin["id"], "username": "root", "empId": "root", "role": "admin",
        "company": "MTPL", "team": None, "email": "admin@mtpl.com",
    }
    with app.app_context():
        claims = verify_token(body["token"])
    assert (claims["id"], claims["role"], claims["company"]) == (admin["id"], "admin", "MTPL")


def test_admin_login_ignores_team(client, admin):
    resp = login(client, admin["email"], admin["password"], "admin", "MTPL", team="Sales")
    assert resp.status_code == 200


def test_employee_login_end_to_end(client, employee):
    resp = client.post("/api/login", json={
        "email": "asha@mtpl.com", "password": "x", "role": "employee",
        "company": "MTPL", "team": "Dev",
    })
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["success"] is True
    assert body["token"]
    assert body["user"]["role"] == "employee"
    assert body["user"]["company"] == "MTPL"
    assert body["user"]["team"] == "Dev"
    assert body["user"]["empId"] == "MT-001"
    assert body["user"]["email"] == "asha@mtpl.com"


@pytest.mark.parametrize("overrides", [
    {"company": "MTI"},
    {"team": "Sales"},
    {"password": "wrong"},
    {"email": "nobody@mtpl.com"},
])
def test_employee_login_mismatch_is_invalid_credentials(client, employee, overrides):
    body = {"email": "asha@mtpl.com", "password": "x", "role": "employee",
            "company": "MTPL", "team": "Dev"}
    body.update(overrides)
    resp = client.post("/api/login", json=body)
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid credentials"}


def test_employee_login_without_team_matches_any_team(client, employee):
    resp = login(client, "asha@mtpl.com", "x", "employee", "MTPL")
    assert resp.status_code == 200


def test_unknown_role_is_validation_failure_without_query(client, monkeypatch):
    def explode(*args, **kwargs):
        raise AssertionError("database must not be queried")

    monkeypatch.setattr(user_service, "find_admin_by_credentials", explode)
    monkeypatch.setattr(employee_service, "find_employee_by_credentials", explode)
    monkeypatch.setattr(user_service, "read", explode)
    monkeypatch.setattr(employee_service, "read", explode)
    resp = login(client, "a@b.com", "pw", "manager", "MTPL")
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Invalid role"}


def test_login_names_every_missing_field(client):
    resp = client.post("/api/login", json={"email": "a@b.com"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Missing required fields: password, role, company"


def test_register_stores_hashed_password(client, app):
    resp = client.post("/api/register", json={
        "username": "ops", "password": "s3cret", "role": "admin", "company": "MTI",
        "email": "ops@mti.com",
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"

    with app.app_context():
        user = db.session.get(AdminUser, body["userId"])
        assert user.password != "s3cret"
        assert user.check_password("s3cret")

    assert login(client, "ops@mti.com", "s3cret", "admin", "MTI").status_code == 200


def test_register_duplicate_username(client, admin):
    resp = client.post("/api/register", json={
        "username": "root", "password": "pw", "role": "admin", "company": "MTPL",
    })
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Username or email already exists"}


def test_register_rejects_non_admin_role(client):
    resp = client.post("/api/register", json={
        "username": "x", "password": "pw", "role": "employee", "company": "MTPL",
    })
    assert resp.status_code == 400


def test_create_employee_hashes_password(client, app):
    resp = client.post("/api/users", json={
        "username": "ravi", "empId": "MT-002", "email": "ravi@mtpl.com", "password": "pw",
        "company": "MTPL", "role": "employee", "team": "Support",
    })
    assert resp.status_code == 201
    assert resp.get_json()["message"] == "Employee added successfully"
    with app.app_context():
        emp = db.session.get(Employee, resp.get_json()["userId"])
        assert emp.password != "pw"


# -----------------------------
# token_required
# -----------------------------
def test_missing_token_is_401(client):
    resp = client.get("/api/assets")
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "No token provided"}


@pytest.mark.parametrize("header", ["Bearer garbage", "Bearer", "Basic dXNlcjpwdw=="])
def test_invalid_token_is_403(client, header):
    resp = client.get("/api/assets", headers={"Authorization": header})
    assert resp.status_code == 403
    assert resp.get_json() == {"success": False, "message": "Invalid or expired token"}


def test_expired_token_is_403(client, app):
    import datetime
    from assetdesk.utils.jwt_auth import issue_token

    with app.app_context():
        token = issue_token({"id": 1, "role": "admin", "company": "MTPL"},
                            expires_in=datetime.timedelta(seconds=-1))
    resp = client.get("/api/employees", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 403


def _concrete(rule):
    return rule.replace("<int:employee_id>", "1").replace("<int:asset_id>", "1").replace("<int:ticket_id>", "1")


@pytest.mark.parametrize("method,rule", sorted(k for k, v in ENDPOINT_AUTH.items() if v))
def test_protected_endpoints_require_token(client, method, rule):
    resp = client.open(_concrete(rule), method=method)
    assert resp.status_code == 401
    resp = client.open(_concrete(rule), method=method, headers={"Authorization": "Bearer nope"})
    assert resp.status_code == 403


@pytest.mark.parametrize("method,rule", sorted(k for k, v in ENDPOINT_AUTH.items() if not v))
def test_open_endpoints_ignore_bad_token(client, method, rule):
    resp = client.open(_concrete(rule), method=method, json={},
                       headers={"Authorization": "Bearer nope"})
    assert resp.status_code not in (401, 403)


@pytest.mark.parametrize("field,value", [
    ("email", {"a": 1}),
    ("password", ["x"]),
    ("company", 7),
    ("team", {"name": "Dev"}),
])
def test_login_non_string_field_is_validation_failure(client, employee, field, value):
    body = {"email": "asha@mtpl.com", "password": "x", "role": "employee", "company": "MTPL"}
    body[field] = value
    resp = client.post("/api/login", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": f"Invalid {field}"}


@pytest.mark.parametrize("field,value", [("username", ["ops"]), ("email", {"to": "x"})])
def test_register_non_string_field_is_validation_failure(client, app, field, value):
    body = {"username": "ops", "password": "pw", "role": "admin", "company": "MTI"}
    body[field] = value
    resp = client.post("/api/register", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["message"] == f"Invalid {field}"
    with app.app_context():
        assert AdminUser.query.count() == 0


@pytest.mark.parametrize("role,email,hashed", [
    ("admin", "nobody@mtpl.com", True),
    ("admin", "admin@mtpl.com", False),
    ("employee", "nobody@mtpl.com", True),
    ("employee", "asha@mtpl.com", False),
])
def test_unknown_email_still_checks_a_hash(client, admin, employee, monkeypatch, role, email, hashed):
    calls = []
    monkeypatch.setattr(user_service, "check_unknown_password", calls.append)
    monkeypatch.setattr(employee_service, "check_unknown_password", calls.append)

    resp = login(client, email, "wrong", role, "MTPL")
    assert resp.status_code == 401
    assert calls == (["wrong"] if hashed else [])


def test_token_required_raises_auth_errors(app):
    from assetdesk.utils.decorators import token_required
    from assetdesk.utils.errors import ForbiddenError, UnauthenticatedError

    view = token_required(lambda: "ok")
    with app.test_request_context("/api/assets"):
        with pytest.raises(UnauthenticatedError):
            view()
    with app.test_request_context("/api/assets", headers={"Authorization": "Bearer nope"}):
        with pytest.raises(ForbiddenError) as exc:
            view()
    assert (exc.value.status_code, exc.value.message) == (403, "Invalid or expired token")
