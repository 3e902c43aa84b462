"""
Seed Marker Model
"""

from clubsite.extensions import db


class SeedRun(db.Model):
    """Written in the same transaction as the fixture rows it records."""
    __tablename__ = 'seed_runs'

    id = db.Column(db.Integer, primary_key=True)
    completed_at = db.Column(db.DateTime, default=db.func.current_timestamp(), nullable=False)
    rows_loaded = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<SeedRun {self.completed_at} rows={self.rows_loaded}>'
