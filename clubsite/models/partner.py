"""
Partner Model
"""

from clubsite.extensions import db


class Partner(db.Model):
    __tablename__ = 'partners'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=False)
    benefits = db.Column(db.Text, nullable=False)
    logo_url = db.Column(db.String(255))
    website_url = db.Column(db.String(255))

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'benefits': self.benefits,
            'logo_url': self.logo_url,
            'website_url': self.website_url,
        }

    def __repr__(self):
        return f'<Partner {self.name}>'
