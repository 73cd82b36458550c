from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import load_only

from .errors import Conflict
from .models import FACULTY_FIELDS, Faculty, User


class _SessionStore:
    """Shared commit/rollback handling for stores bound to one session."""

    def __init__(self, session):
        self.session = session

    def _commit(self):
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


class UserStore(_SessionStore):

    def find_by_username(self, username):
        return self.session.query(User).filter_by(username=username).first()

    def insert(self, username, password_hash):
        user = User(username=username, password_hash=password_hash)
        self.session.add(user)
        try:
            self._commit()
        except IntegrityError:
            # unique constraint on username lost a race with another register
            raise Conflict()
        return user


class FacultyStore(_SessionStore):

    def insert(self, fields, photo=''):
        faculty = Faculty(photo=photo or '')
        self._assign(faculty, fields)
        self.session.add(faculty)
        self._commit()
        return faculty

    def list_summaries(self):
        return (
            self.session.query(Faculty)
            .options(load_only(Faculty.name, Faculty.designation, Faculty.department, Faculty.photo))
            .all()
        )

    def get(self, faculty_id):
        return self.session.get(Faculty, faculty_id)

    def update(self, faculty, fields, photo=None):
        self._assign(faculty, fields)
        if photo is not None:
            faculty.photo = photo
        self._commit()
        return faculty

    def delete(self, faculty_id):
        """Remove a record and return a snapshot of it, or None if unknown."""
        faculty = self.get(faculty_id)
        if faculty is None:
            return None
        # snapshot before commit, the instance is detached afterwards
        record = faculty.to_dict()
        self.session.delete(faculty)
        self._commit()
        return record

    @staticmethod
    def _assign(faculty, fields):
        # every text field is overwritten; a missing one becomes NULL
        for wire_name, attr in FACULTY_FIELDS:
            setattr(faculty, attr, fields.get(wire_name))
