from werkzeug.security import generate_password_hash, check_password_hash

DEFAULT_METHOD = 'pbkdf2:sha256:600000'


class PasswordHasher:
    """Salted one-way hashing with a fixed cost factor.

    Every call to ``hash`` draws a fresh random salt, so hashing the same
    password twice gives different strings; ``verify`` recomputes the hash
    with the salt and parameters embedded in the stored value.
    """

    def __init__(self, method=DEFAULT_METHOD, salt_length=16):
        self.method = method
        self.salt_length = salt_length

    def hash(self, password):
        return generate_password_hash(password, method=self.method, salt_length=self.salt_length)

    def verify(self, password_hash, password):
        if not password_hash or password is None:
            return False
        return check_password_hash(password_hash, password)
