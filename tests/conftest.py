import pytest

from assetdesk import create_app
from assetdesk.config import TestingConfig
from assetdesk.models import db
from assetdesk.services import employees as employee_service
from assetdesk.services import users as user_service


class FakeMailer:
    """Records messages instead of talking to SMTP."""

    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error
        self.sent = []

    def send(self, to, subject, html_body):
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "html": html_body})
        return self.result


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def app(mailer):
    app = create_app(TestingConfig, mailer=mailer)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    with app.app_context():
        user_id = user_service.create_admin(
            username="root", password="admin-pass", company="MTPL", email="admin@mtpl.com")
    return {"id": user_id, "email": "admin@mtpl.com", "password": "admin-pass", "company": "MTPL"}


@pytest.fixture
def employee(app):
    with app.app_context():
        user_id = employee_service.create_employee(
            username="asha", emp_id="MT-001", email="asha@mtpl.com", password="x",
            company="MTPL", team="Dev")
    return {"id": user_id, "empId": "MT-001", "email": "asha@mtpl.com", "password": "x",
            "company": "MTPL", "team": "Dev"}


def login(client, email, password, role, company, team=None):
    body = {"email": email, "password": password, "role": role, "company": company}
    if team:
        body["team"] = team
    return client.post("/api/login", json=body)


@pytest.fixture
def admin_headers(client, admin):
    resp = login(client, admin["email"], admin["password"], "admin", admin["company"])
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


@pytest.fixture
def employee_headers(client, employee):
    resp = login(client, employee["email"], employee["password"], "employee",
                 employee["company"], employee["team"])
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


def asset_body(**overrides):
    body = {
        "name": "ThinkPad T14",
        "tagNo": "MTPL-LAP-001",
        "company": "MTPL",
        "team": "Dev",
        "os": "Windows 11",
        "serialNumber": "SN-1001",
        "status": "In Stock",
        "purchaseDate": "2024-03-15",
        "peripherals": ["Mouse", "Keyboard"],
    }
    body.update(overrides)
    return body
