"""
Flask Extensions

Admin authentication is session-based. Sessions are stored server-side so
that clearing one on logout invalidates any copy of the cookie a client kept.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_session import Session

# Database instance
db = SQLAlchemy()

# Server-side session store
server_session = Session()
