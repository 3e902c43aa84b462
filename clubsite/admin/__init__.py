"""
Admin Blueprint

Admin authentication is session-based: a single configured identity, checked
at login and carried as session['is_admin'] in the server-side session.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from clubsite.admin import routes  # noqa: E402, F401
