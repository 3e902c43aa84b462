"""
Error Handlers

Fallback pages for unmatched routes, oversized uploads and unhandled
exceptions. Internal error detail is logged, never rendered.
"""

import logging

from flask import render_template
from werkzeug.exceptions import HTTPException, InternalServerError

logger = logging.getLogger(__name__)


def register_error_handlers(app):

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('errors/404.html', title='Page Not Found'), 404

    @app.errorhandler(413)
    def upload_too_large(e):
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return render_template('errors/413.html', title='Upload Too Large', limit_mb=limit_mb), 413

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException) and not isinstance(e, InternalServerError):
            return e
        logger.exception('Unhandled error: %s', e)
        return render_template('errors/500.html', title='Something went wrong'), 500
