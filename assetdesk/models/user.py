from datetime import datetime

from werkzeug.security import check_password_hash, generate_password_hash

from . import db

# login checks this when no account matches the email
DUMMY_PASSWORD_HASH = generate_password_hash("no-such-account")


def check_unknown_password(raw_password):
    check_password_hash(DUMMY_PASSWORD_HASH, str(raw_password or ""))


class AdminUser(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=True)
    password = db.Column(db.String(255), nullable=False)  # werkzeug hash
    role = db.Column(db.String(20), nullable=False, default='admin')
    company = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def set_password(self, raw_password):
        self.password = generate_password_hash(str(raw_password))

    def check_password(self, raw_password):
        return check_password_hash(self.password, str(raw_password or ""))

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "empId": self.username,
            "email": None,
            "company": self.company,
            "role": self.role,
            "team": None,
        }
