import logging

from .errors import Conflict, InvalidCredentials

logger = logging.getLogger(__name__)


class AuthService:
    """Account registration and one-shot credential checks.

    No session or token is issued; a successful login only echoes the
    username back to the caller.
    """

    def __init__(self, users, hasher):
        self.users = users
        self.hasher = hasher

    def register(self, username, password):
        if self.users.find_by_username(username) is not None:
            raise Conflict()
        self.users.insert(username, self.hasher.hash(password))
        logger.info("Registered user %s", username)

    def login(self, username, password):
        user = self.users.find_by_username(username)
        # same error for unknown user and wrong password
        if user is None or not self.hasher.verify(user.password_hash, password):
            logger.info("Rejected login for %s", username)
            raise InvalidCredentials()
        return user.username
