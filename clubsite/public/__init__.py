"""
Public Blueprint

Read-only club pages, the membership application form, the application
status lookup and the JSON API.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from clubsite.public import routes, api  # noqa: E402, F401
