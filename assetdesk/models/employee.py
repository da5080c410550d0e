from datetime import datetime

from werkzeug.security import check_password_hash, generate_password_hash

from . import db


class Employee(db.Model):
    __tablename__ = 'employee'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), nullable=False)
    emp_id = db.Column('empId', db.String(50), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # werkzeug hash
    company = db.Column(db.String(100), nullable=False, index=True)
    role = db.Column(db.String(20), nullable=False, default='employee')
    team = db.Column(db.String(20), nullable=False)  # Dev / Support / Sales
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def set_password(self, raw_password):
        self.password = generate_password_hash(str(raw_password))

    def check_password(self, raw_password):
        return check_password_hash(self.password, str(raw_password or ""))

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "empId": self.emp_id,
            "email": self.email,
            "company": self.company,
            "role": self.role,
            "team": self.team,
        }
