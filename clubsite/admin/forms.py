"""
Admin Entity Forms

Field definitions for the four content types managed from the admin panel,
plus parsing of the submitted form into model fields.
"""

from collections import namedtuple
from datetime import date

from clubsite.services import events, team_members, partners, questions

# input_type is the HTML <input> type, or 'textarea'
Field = namedtuple('Field', 'name label required input_type')


class EntityForm:
    """Describes how one entity is edited in the admin panel.

    slug      -- used in outcome flags, e.g. 'event' -> 'event-added'
    image     -- (model attribute, upload field name, image folder) or None
    """

    def __init__(self, slug, title, repo, fields, image=None):
        self.slug = slug
        self.title = title
        self.repo = repo
        self.fields = fields
        self.image = image

    def parse(self, form):
        """Return (values, error) for a submitted form.

        `error` is the first validation message, or None when every required
        field is present and well-formed.
        """
        values = {}
        for field in self.fields:
            raw = form.get(field.name, '').strip()
            if field.required and not raw:
                return values, f'{field.label} is required.'
            if field.input_type == 'number':
                try:
                    raw = int(raw)
                except ValueError:
                    return values, f'{field.label} must be a whole number.'
                if raw < 0:
                    return values, f'{field.label} cannot be negative.'
            elif field.input_type == 'date' and raw:
                try:
                    raw = date.fromisoformat(raw).isoformat()
                except ValueError:
                    return values, f'{field.label} must be a date (YYYY-MM-DD).'
            values[field.name] = raw if raw != '' else None
        return values, None

    def initial(self, item=None):
        """Field values used to pre-fill the form."""
        if item is None:
            return {}
        return {field.name: getattr(item, field.name) for field in self.fields}


EVENT_FORM = EntityForm('event', 'Event', events, [
    Field('title', 'Title', True, 'text'),
    Field('date', 'Date', True, 'date'),
    Field('time', 'Time', True, 'text'),
    Field('location', 'Location', True, 'text'),
    Field('seats', 'Seats', True, 'number'),
    Field('description', 'Description', True, 'textarea'),
], image=('image_url', 'image', 'events'))

TEAM_FORM = EntityForm('team-member', 'Team Member', team_members, [
    Field('name', 'Name', True, 'text'),
    Field('role', 'Role', True, 'text'),
    Field('category', 'Category', True, 'text'),
    Field('email', 'Email', False, 'email'),
], image=('image_url', 'image', 'team'))

PARTNER_FORM = EntityForm('partner', 'Partner', partners, [
    Field('name', 'Name', True, 'text'),
    Field('description', 'Description', True, 'textarea'),
    Field('benefits', 'Benefits', True, 'textarea'),
    Field('website_url', 'Website', False, 'url'),
], image=('logo_url', 'logo', 'partners'))

QUESTION_FORM = EntityForm('question', 'Question', questions, [
    Field('category', 'Category', True, 'text'),
    Field('subcategory', 'Subcategory', True, 'text'),
    Field('title', 'Title', True, 'text'),
    Field('link', 'Link', True, 'url'),
])
