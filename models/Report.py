from app import db
from datetime import datetime, timezone

SUBMITTED = 'Submitted'
IN_PROGRESS = 'In Progress'
RESOLVED = 'Resolved'
REJECTED = 'Rejected'

VALID_STATUSES = [SUBMITTED, IN_PROGRESS, RESOLVED, REJECTED]

REQUIRED_FIELDS = ['title', 'category', 'priority', 'location', 'description']


def utcnow():
    # SQLite stores naive datetimes, keep everything in UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Report(db.Model):
    # AUTOINCREMENT keeps ids from ever being reused
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(50), nullable=False)
    priority = db.Column(db.String(50), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    photo = db.Column(db.String(255))
    status = db.Column(db.String(50), nullable=False, default=SUBMITTED)

    # Owner tag for the "my reports" view
    user_id = db.Column(db.String(100))

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f'<Report {self.id} {self.title!r} - {self.status}>'

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "priority": self.priority,
            "location": self.location,
            "description": self.description,
            "photo": self.photo,
            "status": self.status,
            "user_id": self.user_id,
            "created_at": self.created_at.replace(tzinfo=timezone.utc).isoformat(timespec="microseconds"),
            "updated_at": self.updated_at.replace(tzinfo=timezone.utc).isoformat(timespec="microseconds")
        }
