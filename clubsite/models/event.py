"""
Event Model
"""

from clubsite.extensions import db


class Event(db.Model):
    """A club event; `date` is stored as an ISO `YYYY-MM-DD` string."""
    __tablename__ = 'events'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    date = db.Column(db.String(10), nullable=False, index=True)
    time = db.Column(db.String(50), nullable=False)
    location = db.Column(db.String(200), nullable=False)
    seats = db.Column(db.Integer, nullable=False)
    description = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(255))

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'date': self.date,
            'time': self.time,
            'location': self.location,
            'seats': self.seats,
            'description': self.description,
            'image_url': self.image_url,
        }

    def __repr__(self):
        return f'<Event {self.title} on {self.date}>'
