"""
Team Member Model
"""

from clubsite.extensions import db


class TeamMember(db.Model):
    """Club team member, shown on the team page grouped by category"""
    __tablename__ = 'team_members'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(120), nullable=False)
    category = db.Column(db.String(80), nullable=False)
    email = db.Column(db.String(120))
    image_url = db.Column(db.String(255))

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'role': self.role,
            'category': self.category,
            'email': self.email,
            'image_url': self.image_url,
        }

    def __repr__(self):
        return f'<TeamMember {self.name} ({self.role})>'
