from collections import namedtuple

from flask import current_app, request

EXTENSION_KEY = 'faculty_portal'

Services = namedtuple('Services', ['auth', 'faculty', 'photos'])


def get_services():
    """Services built by create_app() for the running application."""
    return current_app.extensions[EXTENSION_KEY]


def request_data():
    """Body fields from a JSON object or, failing that, the submitted form."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def text_field(data, key):
    value = data.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
