"""
Question Bank Model
"""

from clubsite.extensions import db


class Question(db.Model):
    """Practice problem link, grouped by category then subcategory"""
    __tablename__ = 'questions'

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(80), nullable=False)
    subcategory = db.Column(db.String(80), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    link = db.Column(db.String(500), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'category': self.category,
            'subcategory': self.subcategory,
            'title': self.title,
            'link': self.link,
        }

    def __repr__(self):
        return f'<Question {self.category}/{self.subcategory}: {self.title}>'
