"""
Models Package

Exports all models for easy importing.
"""

from clubsite.models.event import Event
from clubsite.models.team import TeamMember
from clubsite.models.partner import Partner
from clubsite.models.question import Question
from clubsite.models.member import Member, MEMBER_STATUSES
from clubsite.models.seed import SeedRun

__all__ = ['Event', 'TeamMember', 'Partner', 'Question', 'Member', 'MEMBER_STATUSES', 'SeedRun']
