from datetime import date, datetime

import pytest

from clubsite.extensions import db
from clubsite.models import Member
from clubsite.services import (
    events, team_members, questions, members,
    DuplicateEmailError, InvalidStatusError,
)


def _event(title, when):
    return events.add(title=title, date=when, time='1 PM', location='Hall', seats=1, description='d')


def _member(email, **extra):
    fields = dict(name='N', email=email, student_id='1', department='CSE', semester='1')
    fields.update(extra)
    return members.add(**fields)


def test_generic_crud(app):
    assert events.count() == 0
    event = _event('A', '2030-01-01')
    assert events.count() == 1
    assert events.get_by_id(event.id).title == 'A'

    updated = events.update(event.id, title='B', seats=7)
    assert updated.id == event.id
    assert events.get_by_id(event.id).title == 'B'
    assert events.get_by_id(event.id).seats == 7

    assert events.update(999, title='nope') is None
    assert events.delete(999) is False
    assert events.delete(event.id) is True
    assert events.get_by_id(event.id) is None
    assert events.count() == 0


def test_event_ordering_and_upcoming(app):
    _event('middle', '2026-06-15')
    _event('old', '2026-01-01')
    _event('today', '2026-06-10')
    _event('late', '2027-01-01')
    today = date(2026, 6, 10)

    assert [e.title for e in events.get_all()] == ['late', 'middle', 'today', 'old']
    assert [e.title for e in events.get_upcoming(today)] == ['today', 'middle', 'late']
    assert [e.title for e in events.get_past(today)] == ['old']


def test_team_grouped_by_category(app):
    team_members.add(name='P', role='President', category='Executive')
    team_members.add(name='A', role='Advisor', category='Advisors')
    team_members.add(name='S', role='Secretary', category='Executive')

    grouped = team_members.grouped()
    assert list(grouped) == ['Executive', 'Advisors']
    assert [m.name for m in grouped['Executive']] == ['P', 'S']
    assert [m.name for m in team_members.get_by_category('Advisors')] == ['A']


def test_questions_grouped_by_category_and_subcategory(app):
    questions.add(category='DS', subcategory='Trees', title='t1', link='l')
    questions.add(category='Algo', subcategory='DP', title='d1', link='l')
    questions.add(category='DS', subcategory='Arrays', title='a1', link='l')
    questions.add(category='DS', subcategory='Arrays', title='a2', link='l')

    grouped = questions.grouped()
    assert list(grouped) == ['Algo', 'DS']
    assert list(grouped['DS']) == ['Arrays', 'Trees']
    assert [q.title for q in grouped['DS']['Arrays']] == ['a1', 'a2']
    assert [q.title for q in questions.get_by_category('DS')] == ['a1', 'a2', 't1']


def test_member_add_forces_pending_and_normalises_email(app):
    member = _member('  Mixed.Case@Example.EDU ', status='approved')
    assert member.status == 'pending'
    assert member.email == 'mixed.case@example.edu'
    assert members.get_by_email('MIXED.CASE@example.edu').id == member.id
    assert members.get_by_email('') is None


def test_member_duplicate_email(app):
    _member('dup@example.edu')
    with pytest.raises(DuplicateEmailError):
        _member('dup@example.edu')
    assert members.count() == 1


def test_member_unique_constraint_is_authoritative(app, monkeypatch):
    _member('race@example.edu')
    # Simulate a concurrent insert slipping past the pre-check
    monkeypatch.setattr(members, 'get_by_email', lambda email: None)
    with pytest.raises(DuplicateEmailError):
        _member('race@example.edu')
    assert Member.query.count() == 1


def test_members_newest_first_with_id_fallback(app):
    a = _member('a@example.edu')
    b = _member('b@example.edu')
    c = _member('c@example.edu')
    d = _member('d@example.edu')
    a.created_at = datetime(2024, 1, 1)
    b.created_at = datetime(2025, 1, 1)
    c.created_at = None
    d.created_at = None
    db.session.commit()

    assert [m.email for m in members.get_all()] == [
        'b@example.edu', 'a@example.edu', 'd@example.edu', 'c@example.edu']


def test_update_status(app):
    member = _member('s@example.edu')
    assert members.update_status(member.id, 'rejected').status == 'rejected'
    assert members.update_status(12345, 'approved') is None
    with pytest.raises(InvalidStatusError):
        members.update_status(member.id, 'maybe')
    assert members.get_by_id(member.id).status == 'rejected'


def test_member_to_dict(app):
    member = _member('Dict@Example.edu', phone='0123', interests='robotics')
    data = member.to_dict()
    assert data['email'] == 'dict@example.edu'
    assert data['status'] == 'pending'
    assert data['phone'] == '0123'
    assert data['interests'] == 'robotics'
    assert isinstance(data['created_at'], str)
