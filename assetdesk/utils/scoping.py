from flask import current_app

from assetdesk.utils.errors import ValidationError


def resolve_company_scope(company=None, is_admin=False, allow_unscoped=None):
    """
    Admins are never scoped: the company key is ignored and None (all rows)
    is returned. Everyone else is limited to their own company.

    A non-admin request with no company is rejected unless
    ALLOW_UNSCOPED_LISTS is enabled, in which case it falls back to all rows.
    """
    if is_admin:
        return None
    if company:
        return company

    if allow_unscoped is None:
        allow_unscoped = current_app.config.get("ALLOW_UNSCOPED_LISTS", False)
    if allow_unscoped:
        current_app.logger.warning("Unscoped list served to a non-admin caller")
        return None
    raise ValidationError("Company scope is required")


def apply_company_scope(query, column, scope):
    if scope is None:
        return query
    return query.filter(column == scope)
