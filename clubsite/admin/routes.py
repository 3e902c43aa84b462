"""
Admin Routes

Login/logout, the dashboard and the add/edit/delete workflows for events,
team members, partners and questions, plus membership review.

Every mutation ends in a redirect to the dashboard carrying a short outcome
flag in the query string (``?success=event-added``, ``?error=...``).
"""

import hmac
import logging

from flask import current_app, render_template, request, redirect, url_for, session
from sqlalchemy.exc import SQLAlchemyError

from clubsite.admin import admin_bp
from clubsite.admin.decorators import admin_required
from clubsite.admin.forms import EVENT_FORM, TEAM_FORM, PARTNER_FORM, QUESTION_FORM
from clubsite.models import MEMBER_STATUSES
from clubsite.services import (
    events, team_members, partners, questions, members,
    InvalidStatusError, InvalidUploadError,
    save_image, delete_image, placeholder_url,
)

logger = logging.getLogger(__name__)

ENTITY_FORMS = (EVENT_FORM, TEAM_FORM, PARTNER_FORM, QUESTION_FORM)


def _build_outcome_messages():
    messages = {
        'member-status-updated': ('success', 'Application status updated.'),
        'member-not-found': ('danger', 'That application no longer exists.'),
        'member-update-failed': ('danger', 'Could not update the application status.'),
        'invalid-status': ('danger', 'Unknown application status.'),
    }
    for form in ENTITY_FORMS:
        messages.update({
            f'{form.slug}-added': ('success', f'{form.title} added successfully.'),
            f'{form.slug}-updated': ('success', f'{form.title} updated successfully.'),
            f'{form.slug}-deleted': ('success', f'{form.title} deleted successfully.'),
            f'{form.slug}-not-found': ('danger', f'{form.title} not found.'),
            f'{form.slug}-add-failed': ('danger', f'Could not add {form.title.lower()}.'),
            f'{form.slug}-update-failed': ('danger', f'Could not update {form.title.lower()}.'),
            f'{form.slug}-delete-failed': ('danger', f'Could not delete {form.title.lower()}.'),
        })
    return messages


OUTCOME_MESSAGES = _build_outcome_messages()


def _credentials_match(username, password):
    config = current_app.config
    user_ok = hmac.compare_digest(username.encode(), config['ADMIN_USERNAME'].encode())
    pass_ok = hmac.compare_digest(password.encode(), config['ADMIN_PASSWORD'].encode())
    return user_ok and pass_ok


def _to_dashboard(**flag):
    return redirect(url_for('admin.admin_dashboard', **flag))


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------

@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login against the configured identity."""
    if session.get('is_admin'):
        return redirect(url_for('admin.admin_dashboard'))

    notice = 'You have been logged out.' if request.args.get('success') == 'logged-out' else None

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '').strip()

        if not username or not password:
            return render_template('admin/login.html',
                                   error='Please enter both username and password.'), 400

        if not _credentials_match(username, password):
            logger.warning('Failed admin login attempt from %s', request.remote_addr)
            return render_template('admin/login.html',
                                   error='Invalid administrator credentials.'), 401

        # The session interface stores the new session while the redirect
        # response is being finalised, before it reaches the client.
        session.clear()
        session['is_admin'] = True
        session['admin_username'] = username
        current_app.session_interface.regenerate(session)
        logger.info('Admin %s logged in', username)
        return redirect(url_for('admin.admin_dashboard'))

    return render_template('admin/login.html', notice=notice)


@admin_bp.route('/logout', methods=['GET', 'POST'])
@admin_required
def admin_logout():
    """Admin logout - removes the session from the server-side store."""
    session.clear()
    return redirect(url_for('admin.admin_login', success='logged-out'))


# -----------------------------------------------------------------------------
# Dashboard
# -----------------------------------------------------------------------------

@admin_bp.route('/')
@admin_bp.route('/dashboard')
@admin_required
def admin_dashboard():
    """Everything the admin manages on one page, plus the last outcome."""
    outcome = None
    flag = request.args.get('success') or request.args.get('error')
    if flag in OUTCOME_MESSAGES:
        outcome = OUTCOME_MESSAGES[flag]

    all_events = events.get_all()
    all_team = team_members.get_all()
    all_partners = partners.get_all()
    all_questions = questions.get_all()
    all_members = members.get_all()

    return render_template('admin/dashboard.html',
                           outcome=outcome,
                           events=all_events,
                           team_members=all_team,
                           partners=all_partners,
                           questions=all_questions,
                           members=all_members,
                           statuses=MEMBER_STATUSES,
                           pending_count=sum(1 for m in all_members if m.status == 'pending'),
                           admin_username=session.get('admin_username', 'Admin'))


# -----------------------------------------------------------------------------
# Shared add / edit / delete workflow
# -----------------------------------------------------------------------------

def _render_form(entity, values, error=None, item=None):
    return render_template('admin/entity_form.html',
                           entity=entity,
                           values=values,
                           error=error,
                           item=item), 400 if error else 200


def _store_upload(entity):
    """Save the submitted image for `entity`. Returns (url or None, error)."""
    if entity.image is None:
        return None, None
    _, field_name, folder = entity.image
    try:
        return save_image(request.files.get(field_name), folder), None
    except InvalidUploadError as e:
        return None, str(e)


def _add(entity):
    if request.method == 'GET':
        return _render_form(entity, {})

    values, error = entity.parse(request.form)
    new_image = None
    if error is None:
        new_image, error = _store_upload(entity)
    if error:
        return _render_form(entity, request.form, error)

    if entity.image is not None:
        attr, _, folder = entity.image
        values[attr] = new_image or placeholder_url(folder)

    try:
        entity.repo.add(**values)
    except SQLAlchemyError:
        logger.exception('Could not add %s', entity.slug)
        delete_image(new_image)
        return _to_dashboard(error=f'{entity.slug}-add-failed')
    return _to_dashboard(success=f'{entity.slug}-added')


def _edit(entity, item_id):
    item = entity.repo.get_by_id(item_id)
    if item is None:
        return _to_dashboard(error=f'{entity.slug}-not-found')

    if request.method == 'GET':
        return _render_form(entity, entity.initial(item), item=item)

    values, error = entity.parse(request.form)
    new_image = None
    if error is None:
        new_image, error = _store_upload(entity)
    if error:
        return _render_form(entity, request.form, error, item=item)

    old_image = None
    if new_image:
        attr = entity.image[0]
        old_image = getattr(item, attr)
        values[attr] = new_image

    try:
        updated = entity.repo.update(item_id, **values)
    except SQLAlchemyError:
        logger.exception('Could not update %s #%s', entity.slug, item_id)
        delete_image(new_image)
        return _to_dashboard(error=f'{entity.slug}-update-failed')
    if updated is None:
        delete_image(new_image)
        return _to_dashboard(error=f'{entity.slug}-not-found')

    delete_image(old_image)
    return _to_dashboard(success=f'{entity.slug}-updated')


def _delete(entity, item_id):
    item = entity.repo.get_by_id(item_id)
    if item is None:
        return _to_dashboard(error=f'{entity.slug}-not-found')
    image = getattr(item, entity.image[0]) if entity.image else None

    try:
        entity.repo.delete(item_id)
    except SQLAlchemyError:
        logger.exception('Could not delete %s #%s', entity.slug, item_id)
        return _to_dashboard(error=f'{entity.slug}-delete-failed')

    delete_image(image)
    return _to_dashboard(success=f'{entity.slug}-deleted')


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------

@admin_bp.route('/events/add', methods=['GET', 'POST'])
@admin_required
def add_event():
    return _add(EVENT_FORM)


@admin_bp.route('/events/<int:item_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_event(item_id):
    return _edit(EVENT_FORM, item_id)


@admin_bp.route('/events/<int:item_id>/delete', methods=['POST'])
@admin_required
def delete_event(item_id):
    return _delete(EVENT_FORM, item_id)


# -----------------------------------------------------------------------------
# Team members
# -----------------------------------------------------------------------------

@admin_bp.route('/team/add', methods=['GET', 'POST'])
@admin_required
def add_team_member():
    return _add(TEAM_FORM)


@admin_bp.route('/team/<int:item_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_team_member(item_id):
    return _edit(TEAM_FORM, item_id)


@admin_bp.route('/team/<int:item_id>/delete', methods=['POST'])
@admin_required
def delete_team_member(item_id):
    return _delete(TEAM_FORM, item_id)


# -----------------------------------------------------------------------------
# Partners
# -----------------------------------------------------------------------------

@admin_bp.route('/partners/add', methods=['GET', 'POST'])
@admin_required
def add_partner():
    return _add(PARTNER_FORM)


@admin_bp.route('/partners/<int:item_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_partner(item_id):
    return _edit(PARTNER_FORM, item_id)


@admin_bp.route('/partners/<int:item_id>/delete', methods=['POST'])
@admin_required
def delete_partner(item_id):
    return _delete(PARTNER_FORM, item_id)


# -----------------------------------------------------------------------------
# Question bank
# -----------------------------------------------------------------------------

@admin_bp.route('/questions/add', methods=['GET', 'POST'])
@admin_required
def add_question():
    return _add(QUESTION_FORM)


@admin_bp.route('/questions/<int:item_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_question(item_id):
    return _edit(QUESTION_FORM, item_id)


@admin_bp.route('/questions/<int:item_id>/delete', methods=['POST'])
@admin_required
def delete_question(item_id):
    return _delete(QUESTION_FORM, item_id)


# -----------------------------------------------------------------------------
# Membership review
# -----------------------------------------------------------------------------

@admin_bp.route('/members/<int:member_id>/status', methods=['POST'])
@admin_required
def update_member_status(member_id):
    """Set an application to pending, approved or rejected."""
    status = request.form.get('status', '').strip()
    try:
        member = members.update_status(member_id, status)
    except InvalidStatusError:
        return _to_dashboard(error='invalid-status')
    except SQLAlchemyError:
        logger.exception('Could not update status of member #%s', member_id)
        return _to_dashboard(error='member-update-failed')

    if member is None:
        return _to_dashboard(error='member-not-found')
    logger.info('Member #%s marked %s', member_id, status)
    return _to_dashboard(success='member-status-updated')
