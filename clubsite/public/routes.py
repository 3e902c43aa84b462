"""
Public Routes

Club pages rendered from the data access layer. Nothing here writes to the
store except the membership application form.
"""

import logging
from datetime import date

from flask import render_template, request
from sqlalchemy.exc import SQLAlchemyError

from clubsite.public import public_bp
from clubsite.services import events, team_members, partners, questions, members, DuplicateEmailError

logger = logging.getLogger(__name__)

APPLICATION_FIELDS = ('name', 'email', 'student_id', 'department', 'semester')


@public_bp.route('/')
def index():
    """Home page with upcoming events and partners"""
    return render_template('public/index.html',
                           title='Home',
                           upcoming_events=events.get_upcoming(),
                           partners=partners.get_all())


@public_bp.route('/events')
def events_page():
    today = date.today()
    return render_template('public/events.html',
                           title='Events',
                           upcoming_events=events.get_upcoming(today),
                           past_events=events.get_past(today))


@public_bp.route('/team')
def team():
    return render_template('public/team.html',
                           title='Our Team',
                           grouped_team=team_members.grouped())


@public_bp.route('/partners')
def partners_page():
    return render_template('public/partners.html',
                           title='Partners',
                           partners=partners.get_all())


@public_bp.route('/questions')
def questions_page():
    return render_template('public/questions.html',
                           title='Questions Bank',
                           grouped_questions=questions.grouped())


def _render_join(error=None, success=False, status=200):
    return render_template('public/join.html',
                           title='Join Our Club',
                           form=request.form,
                           error=error,
                           success=success), status


@public_bp.route('/join', methods=['GET', 'POST'])
def join():
    """Membership application form"""
    if request.method == 'GET':
        return _render_join()

    data = {name: request.form.get(name, '').strip() for name in APPLICATION_FIELDS}
    if not all(data.values()):
        return _render_join('Please fill in all required fields', status=400)
    if '@' not in data['email']:
        return _render_join('Please provide a valid email address.', status=400)

    interests = [i.strip() for i in request.form.getlist('interests') if i.strip()]
    try:
        members.add(phone=request.form.get('phone', '').strip() or None,
                    interests=', '.join(interests) or None,
                    **data)
    except DuplicateEmailError:
        return _render_join('An application with this email already exists. '
                            'You can check its status on the Track page.', status=409)
    except SQLAlchemyError:
        logger.exception('Error adding member')
        return _render_join('An error occurred. Please try again.', status=500)

    logger.info('New membership application from %s', data['email'])
    return _render_join(success=True)


@public_bp.route('/track')
def track():
    """Look up the status of a membership application by email"""
    email = request.args.get('email', '').strip()
    member = members.get_by_email(email) if email else None
    return render_template('public/track.html',
                           title='Track Application',
                           email=email,
                           searched=bool(email),
                           member=member)
