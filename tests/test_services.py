import pytest

from faculty_portal.auth_service import AuthService
from faculty_portal.errors import Conflict, InvalidCredentials, NotFound
from faculty_portal.models import db
from faculty_portal.security import PasswordHasher
from faculty_portal.stores import UserStore


def test_unique_constraint_closes_register_race(app):
    """A second insert that skipped the lookup is still rejected by the store."""
    with app.app_context():
        users = UserStore(db.session)
        users.insert('alice', 'hash-1')
        with pytest.raises(Conflict):
            users.insert('alice', 'hash-2')
        # session is usable again after the rollback
        assert users.find_by_username('alice').password_hash == 'hash-1'


def test_auth_service_errors(app):
    with app.app_context():
        service = AuthService(UserStore(db.session), PasswordHasher('pbkdf2:sha256:1000'))
        service.register('alice', 'pw1')
        with pytest.raises(Conflict):
            service.register('alice', 'pw2')
        assert service.login('alice', 'pw1') == 'alice'
        with pytest.raises(InvalidCredentials):
            service.login('alice', 'nope')
        with pytest.raises(InvalidCredentials):
            service.login('nobody', 'pw1')


def test_faculty_service_not_found(app):
    with app.app_context():
        faculty = app.extensions['faculty_portal'].faculty
        for call in (lambda: faculty.get('missing'),
                     lambda: faculty.update('missing', {}),
                     lambda: faculty.delete('missing')):
            with pytest.raises(NotFound):
                call()


def test_hasher_salts_every_call():
    hasher = PasswordHasher('pbkdf2:sha256:1000')
    first, second = hasher.hash('pw'), hasher.hash('pw')
    assert first != second
    assert hasher.verify(first, 'pw')
    assert hasher.verify(second, 'pw')
    assert not hasher.verify(first, 'other')
    assert not hasher.verify('', 'pw')
