"""
Membership Application Model
"""

from clubsite.extensions import db

MEMBER_STATUSES = ('pending', 'approved', 'rejected')


class Member(db.Model):
    """Membership application.

    `status` starts as ``pending`` and only changes through the admin
    review action.
    """
    __tablename__ = 'members'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    student_id = db.Column(db.String(50), nullable=False)
    department = db.Column(db.String(120), nullable=False)
    semester = db.Column(db.String(30), nullable=False)
    phone = db.Column(db.String(30))
    interests = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default='pending')
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'student_id': self.student_id,
            'department': self.department,
            'semester': self.semester,
            'phone': self.phone,
            'interests': self.interests,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Member {self.email} [{self.status}]>'
