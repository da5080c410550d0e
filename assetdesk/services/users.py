from assetdesk.models import db, AdminUser
from assetdesk.models.user import check_unknown_password
from assetdesk.services.persistence import read, write
from assetdesk.utils.scoping import apply_company_scope


def create_admin(username, password, company, email=None, role="admin"):
    def _insert():
        user = AdminUser(username=username, email=email, role=role, company=company)
        user.set_password(password)
        db.session.add(user)
        db.session.flush()
        return user.id

    return write(_insert)


def list_admins(scope=None):
    query = apply_company_scope(AdminUser.query, AdminUser.company, scope)
    return read(lambda: query.order_by(AdminUser.id).all())


def find_admin_by_credentials(email, password):
    user = read(lambda: AdminUser.query.filter_by(email=email, role="admin").first())
    if user is None:
        check_unknown_password(password)
        return None
    return user if user.check_password(password) else None


def list_admin_emails():
    rows = read(lambda: db.session.query(AdminUser.email).filter(AdminUser.role == "admin").all())
    return [email for (email,) in rows if email]
