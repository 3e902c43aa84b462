"""
Data Access Layer

One generic repository per table. Route handlers never query models
directly; they go through the module-level instances defined at the bottom
of this file.
"""

import logging
from collections import OrderedDict
from datetime import date, datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from clubsite.extensions import db
from clubsite.models import Event, TeamMember, Partner, Question, Member, MEMBER_STATUSES

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised when a membership application reuses an existing email."""

    def __init__(self, email):
        super().__init__(f'An application for {email} already exists')
        self.email = email


class InvalidStatusError(ValueError):
    """Raised for a member status outside MEMBER_STATUSES."""


class Repository:
    """Basic CRUD over a single model.

    Every write commits on success; on failure the session is rolled back
    and the SQLAlchemy error re-raised to the caller.
    """

    def __init__(self, model, order_by=None):
        self.model = model
        self.order_by = order_by if order_by is not None else (model.id.asc(),)

    def get_all(self):
        return self.model.query.order_by(*self.order_by).all()

    def get_by_id(self, item_id):
        return db.session.get(self.model, item_id)

    def count(self):
        return self.model.query.count()

    def add(self, **fields):
        item = self.model(**fields)
        db.session.add(item)
        self._commit()
        logger.info('Added %r', item)
        return item

    def update(self, item_id, **fields):
        """Overwrite the given fields. Returns None when the row is missing."""
        item = self.get_by_id(item_id)
        if item is None:
            return None
        for name, value in fields.items():
            setattr(item, name, value)
        self._commit()
        logger.info('Updated %r', item)
        return item

    def delete(self, item_id):
        """Remove the row. Returns False when there was nothing to delete."""
        item = self.get_by_id(item_id)
        if item is None:
            return False
        db.session.delete(item)
        self._commit()
        logger.info('Deleted %s #%s', self.model.__name__, item_id)
        return True

    def _commit(self):
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise


class EventRepository(Repository):

    def __init__(self):
        super().__init__(Event, order_by=(Event.date.desc(), Event.id.desc()))

    def get_upcoming(self, today=None):
        today = (today or date.today()).isoformat()
        return Event.query.filter(Event.date >= today)\
            .order_by(Event.date.asc(), Event.id.asc()).all()

    def get_past(self, today=None):
        today = (today or date.today()).isoformat()
        return Event.query.filter(Event.date < today)\
            .order_by(Event.date.desc(), Event.id.desc()).all()


class TeamMemberRepository(Repository):

    def __init__(self):
        super().__init__(TeamMember)

    def get_by_category(self, category):
        return TeamMember.query.filter_by(category=category)\
            .order_by(TeamMember.id.asc()).all()

    def grouped(self):
        """Team members keyed by category, in order of first appearance."""
        groups = OrderedDict()
        for member in self.get_all():
            groups.setdefault(member.category, []).append(member)
        return groups


class QuestionRepository(Repository):

    def __init__(self):
        super().__init__(Question, order_by=(Question.category, Question.subcategory, Question.id))

    def get_by_category(self, category):
        return Question.query.filter_by(category=category)\
            .order_by(Question.subcategory, Question.id).all()

    def grouped(self):
        """Nested mapping: category -> subcategory -> [Question]."""
        groups = OrderedDict()
        for question in self.get_all():
            by_sub = groups.setdefault(question.category, OrderedDict())
            by_sub.setdefault(question.subcategory, []).append(question)
        return groups


class MemberRepository(Repository):

    def __init__(self):
        super().__init__(Member)

    def get_all(self):
        """Newest applications first; rows without a timestamp sort by id."""
        rows = Member.query.all()
        return sorted(rows, key=lambda m: (m.created_at or datetime.min, m.id), reverse=True)

    def get_by_email(self, email):
        if not email:
            return None
        return Member.query.filter_by(email=email.strip().lower()).first()

    def add(self, **fields):
        """Insert a new pending application.

        The pre-check gives the friendly duplicate message; the UNIQUE
        constraint on `members.email` still decides concurrent submissions.
        """
        email = fields['email'].strip().lower()
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError(email)
        fields.update(email=email, status='pending')
        try:
            return super().add(**fields)
        except IntegrityError:
            raise DuplicateEmailError(email)

    def update_status(self, member_id, status):
        if status not in MEMBER_STATUSES:
            raise InvalidStatusError(f'Unknown member status: {status!r}')
        return self.update(member_id, status=status)


class PartnerRepository(Repository):

    def __init__(self):
        super().__init__(Partner)


events = EventRepository()
team_members = TeamMemberRepository()
partners = PartnerRepository()
questions = QuestionRepository()
members = MemberRepository()
