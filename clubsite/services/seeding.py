"""
Schema Initialization & Seeding

Creates the tables, applies the additive column migration and loads the
bundled fixture data into an empty database.
"""

import json
import logging
import os

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError, SQLAlchemyError

from clubsite.extensions import db
from clubsite.models import Event, TeamMember, Partner, Question, Member, SeedRun

logger = logging.getLogger(__name__)

# (fixture file, model) in load order
SEED_FILES = [
    ('events.json', Event),
    ('team.json', TeamMember),
    ('partners.json', Partner),
    ('questions.json', Question),
    ('members.json', Member),
]

# Columns added after the first release: (table, column, DDL type)
ADDITIVE_COLUMNS = [
    ('members', 'interests', 'TEXT'),
]


def init_database(app):
    """Create tables, migrate and seed. Must run inside an app context."""
    db.create_all()
    apply_additive_columns()
    if app.config.get('SEED_ON_STARTUP'):
        seed_database(app.config['SEED_DATA_DIR'])


def apply_additive_columns():
    """Run every ALTER TABLE ... ADD COLUMN, ignoring columns that exist."""
    for table, column, ddl_type in ADDITIVE_COLUMNS:
        try:
            with db.engine.begin() as conn:
                conn.execute(text(f'ALTER TABLE {table} ADD COLUMN {column} {ddl_type}'))
            logger.info('Added %s column to %s table', column, table)
        except (OperationalError, ProgrammingError) as e:
            message = str(e.orig).lower()
            if 'duplicate column' in message or 'already exists' in message:
                continue
            logger.error('Could not add %s column to %s table: %s', column, table, e)
            raise


def needs_seed():
    """Seed only a database that was never seeded and has no events."""
    if SeedRun.query.first() is not None:
        return False
    return Event.query.count() == 0


def load_fixture(data_dir, filename):
    path = os.path.join(data_dir, filename)
    if not os.path.exists(path):
        logger.warning('Seed file %s not found, skipping', path)
        return []
    with open(path, encoding='utf-8') as fh:
        return json.load(fh)


def seed_database(data_dir):
    """Load fixture rows for every table in a single transaction.

    Returns a dict of table name -> rows inserted; empty when seeding was
    skipped or failed. A failed run leaves nothing behind, so the next start
    tries again.
    """
    if not needs_seed():
        logger.debug('Database already seeded, skipping')
        return {}

    logger.info('Seeding initial data from %s', data_dir)
    loaded = {}
    try:
        for filename, model in SEED_FILES:
            records = load_fixture(data_dir, filename)
            for record in records:
                db.session.add(model(**record))
            loaded[model.__tablename__] = len(records)
        db.session.add(SeedRun(rows_loaded=sum(loaded.values())))
        db.session.commit()
    except (SQLAlchemyError, TypeError, ValueError) as e:
        db.session.rollback()
        logger.error('Error seeding data: %s', e)
        return {}

    logger.info('Data seeded successfully: %s', loaded)
    return loaded
