from uuid import uuid4

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# (wire name, column attribute) for every free-text faculty field
FACULTY_FIELDS = (
    ('name', 'name'),
    ('designation', 'designation'),
    ('department', 'department'),
    ('publications', 'publications'),
    ('researchProjects', 'research_projects'),
    ('articlesAndJournals', 'articles_and_journals'),
    ('workshops', 'workshops'),
    ('coursesHandled', 'courses_handled'),
    ('awardsReceived', 'awards_received'),
)


def _new_id():
    return uuid4().hex


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)


class Faculty(db.Model):
    __tablename__ = 'faculty'

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    name = db.Column(db.Text)
    designation = db.Column(db.Text)
    department = db.Column(db.Text)
    photo = db.Column(db.String(255), nullable=False, default='')  # '/faculty_uploadss/<filename>' or ''
    publications = db.Column(db.Text)
    research_projects = db.Column(db.Text)
    articles_and_journals = db.Column(db.Text)
    workshops = db.Column(db.Text)
    courses_handled = db.Column(db.Text)
    awards_received = db.Column(db.Text)

    def to_summary(self):
        return {
            "_id": self.id,
            "name": self.name,
            "designation": self.designation,
            "department": self.department,
            "photo": self.photo or "",
        }

    def to_dict(self):
        data = {"_id": self.id, "photo": self.photo or ""}
        for wire_name, attr in FACULTY_FIELDS:
            data[wire_name] = getattr(self, attr)
        return data
