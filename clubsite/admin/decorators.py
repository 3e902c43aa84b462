"""
Admin Guard
"""

from functools import wraps
from flask import session, redirect, url_for

def admin_required(f):
    """Only let a logged-in admin through to the wrapped view.

    The claim is ``session['is_admin']``, held in the server-side session
    store and set by admin_login. Without it the request is redirected to
    /admin/login before the view runs, and nothing is written.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        # logout clears the stored session, so a replayed cookie has no claim
        if not session.get('is_admin'):
            return redirect(url_for('admin.admin_login'))
        return f(*args, **kwargs)
    return wrapper
