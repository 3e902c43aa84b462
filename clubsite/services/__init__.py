"""
Services Package

Exports all services for easy importing.
"""

from clubsite.services.repository import (
    events, team_members, partners, questions, members,
    DuplicateEmailError, InvalidStatusError,
)
from clubsite.services.seeding import init_database, seed_database
from clubsite.services.uploads import save_image, delete_image, placeholder_url, InvalidUploadError

__all__ = [
    'events',
    'team_members',
    'partners',
    'questions',
    'members',
    'DuplicateEmailError',
    'InvalidStatusError',
    'init_database',
    'seed_database',
    'save_image',
    'delete_image',
    'placeholder_url',
    'InvalidUploadError',
]
