from flask import Blueprint, current_app, jsonify

from .context import get_services, request_data, text_field
from .errors import PortalError

auth_bp = Blueprint('auth', __name__)


def _credentials():
    # JSON object or urlencoded form; usernames are taken verbatim
    data = request_data()
    username = text_field(data, 'username') or ''
    password = text_field(data, 'password') or ''
    return username, password


@auth_bp.route('/register', methods=['POST'])
def register():
    username, password = _credentials()
    if not username or not password:
        return jsonify({"message": "Username and password are required"}), 400
    try:
        get_services().auth.register(username, password)
    except PortalError as e:
        return jsonify({"message": e.message}), e.status_code
    except Exception:
        current_app.logger.exception("Register failed for %s", username)
        return jsonify({"message": "Server error"}), 500
    return jsonify({"message": "User registered successfully"}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    username, password = _credentials()
    if not username or not password:
        return jsonify({"message": "Invalid username or password"}), 400
    try:
        name = get_services().auth.login(username, password)
    except PortalError as e:
        return jsonify({"message": e.message}), e.status_code
    except Exception:
        current_app.logger.exception("Login failed for %s", username)
        return jsonify({"message": "Error logging in"}), 500
    return jsonify({"message": f"Welcome {name}", "username": name})
