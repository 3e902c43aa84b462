"""
JSON API

Read-only mirrors of the public pages.
"""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from clubsite.public import public_bp
from clubsite.services import events, team_members, partners, questions

logger = logging.getLogger(__name__)


def _json_list(fetch, what):
    try:
        rows = fetch()
    except SQLAlchemyError:
        logger.exception('Error fetching %s', what)
        return jsonify({'error': f'Error fetching {what}'}), 500
    return jsonify([row.to_dict() for row in rows])


@public_bp.route('/api/events')
def api_events():
    return _json_list(events.get_all, 'events')


@public_bp.route('/api/events/upcoming')
def api_upcoming_events():
    return _json_list(events.get_upcoming, 'events')


@public_bp.route('/api/team')
def api_team():
    return _json_list(team_members.get_all, 'team members')


@public_bp.route('/api/partners')
def api_partners():
    return _json_list(partners.get_all, 'partners')


@public_bp.route('/api/questions')
def api_questions():
    return _json_list(questions.get_all, 'questions')
