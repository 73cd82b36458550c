import io

import pytest

from faculty_portal import create_app
from faculty_portal.models import db


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'test.db'}",
        'UPLOAD_FOLDER': str(tmp_path / 'faculty_uploadss'),
        'FRONTEND_DIR': str(tmp_path / 'frontend'),
        # cheap hashing keeps the suite fast
        'PASSWORD_HASH_METHOD': 'pbkdf2:sha256:1000',
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upload_dir(app):
    return app.config['UPLOAD_FOLDER']


def _faculty_form(photo=None, **overrides):
    form = {
        'name': 'Ada Lovelace',
        'designation': 'Professor',
        'department': 'Mathematics',
        'publications': 'Notes on the Analytical Engine',
        'researchProjects': 'Difference engines',
        'articlesAndJournals': 'Scientific Memoirs',
        'workshops': 'Bernoulli numbers',
        'coursesHandled': 'Calculus',
        'awardsReceived': 'None recorded',
    }
    form.update(overrides)
    if photo is not None:
        data, filename = photo
        form['photo'] = (io.BytesIO(data), filename)
    return form


@pytest.fixture
def faculty_form():
    """Builds a multipart faculty form; ``photo`` is a (bytes, filename) pair."""
    return _faculty_form
