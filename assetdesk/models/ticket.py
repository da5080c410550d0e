from datetime import datetime

from . import db


class Ticket(db.Model):
    __tablename__ = 'tickets'

    id = db.Column(db.Integer, primary_key=True)
    # Soft references: no foreign keys, dangling values are allowed
    emp_id = db.Column('empId', db.String(50), nullable=False, index=True)
    serial_no = db.Column('serialNo', db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='Open')  # Open / In Progress / Resolved
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "empId": self.emp_id,
            "serialNo": self.serial_no,
            "description": self.description,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
