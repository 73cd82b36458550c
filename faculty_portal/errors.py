class PortalError(Exception):
    """Base for errors that map onto a client-facing JSON response."""

    status_code = 500
    default_message = 'Server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Conflict(PortalError):
    status_code = 400
    default_message = 'Username already exists'


class InvalidCredentials(PortalError):
    status_code = 400
    default_message = 'Invalid username or password'


class NotFound(PortalError):
    status_code = 404
    default_message = 'Faculty not found'
