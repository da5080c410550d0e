from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .user import AdminUser
from .employee import Employee
from .asset import Asset
from .ticket import Ticket

__all__ = ["db", "AdminUser", "Employee", "Asset", "Ticket"]
