from assetdesk.models import db, Employee
from assetdesk.models.user import check_unknown_password
from assetdesk.services.persistence import read, write
from assetdesk.utils.errors import NotFoundError
from assetdesk.utils.scoping import apply_company_scope


def create_employee(username, emp_id, email, password, company, team, role="employee"):
    def _insert():
        emp = Employee(username=username, emp_id=emp_id, email=email,
                       company=company, role=role, team=team)
        emp.set_password(password)
        db.session.add(emp)
        db.session.flush()
        return emp.id

    return write(_insert)


def list_employees(scope=None):
    query = apply_company_scope(Employee.query, Employee.company, scope)
    return read(lambda: query.order_by(Employee.id).all())


def update_employee(employee_id, fields: dict):
    """Full replace of the editable columns; the password is left alone."""
    values = {
        Employee.username: fields["username"],
        Employee.emp_id: fields["emp_id"],
        Employee.email: fields["email"],
        Employee.company: fields["company"],
        Employee.role: fields["role"],
        Employee.team: fields["team"],
    }
    count = write(lambda: Employee.query.filter(Employee.id == employee_id)
                  .update(values, synchronize_session=False))
    if count == 0:
        raise NotFoundError("Employee not found")


def delete_employee(employee_id):
    count = write(lambda: Employee.query.filter(Employee.id == employee_id)
                  .delete(synchronize_session=False))
    if count == 0:
        raise NotFoundError("Employee not found")


def find_employee_by_credentials(email, password, company, team=None):
    def _lookup():
        query = Employee.query.filter_by(email=email, role="employee", company=company)
        if team:
            query = query.filter_by(team=team)
        return query.first()

    emp = read(_lookup)
    if emp is None:
        check_unknown_password(password)
        return None
    return emp if emp.check_password(password) else None


def emp_id_for(employee_pk):
    row = read(lambda: db.session.query(Employee.emp_id).filter(Employee.id == employee_pk).first())
    return row[0] if row else None


def find_contact(emp_id):
    """(email, username) for an empId, or None when it does not resolve."""
    row = read(lambda: db.session.query(Employee.email, Employee.username)
               .filter(Employee.emp_id == emp_id).first())
    if row is None:
        return None
    return {"email": row.email, "username": row.username}


def usernames_by_emp_id(emp_ids):
    emp_ids = {e for e in emp_ids if e}
    if not emp_ids:
        return {}
    rows = read(lambda: db.session.query(Employee.emp_id, Employee.username)
                .filter(Employee.emp_id.in_(emp_ids)).all())
    return {emp_id: username for emp_id, username in rows}
