from flask import Blueprint, current_app, request, jsonify

from .context import get_services, request_data, text_field
from .errors import PortalError
from .models import FACULTY_FIELDS

faculty_bp = Blueprint('faculty_api', __name__, url_prefix='/api/faculty')


def _form_fields():
    data = request_data()
    return {wire_name: text_field(data, wire_name) for wire_name, _ in FACULTY_FIELDS}


def _error(e):
    return jsonify({"success": False, "message": e.message}), e.status_code


def _server_error(message):
    current_app.logger.exception(message)
    return jsonify({"success": False, "message": message}), 500


@faculty_bp.route('', methods=['POST'])
def create_faculty():
    try:
        get_services().faculty.create(_form_fields(), request.files.get('photo'))
    except Exception:
        return _server_error("Error saving faculty")
    return jsonify({"success": True, "message": "Faculty saved successfully!"})


@faculty_bp.route('', methods=['GET'])
def list_faculty():
    """Index view: name, designation, department and photo only."""
    try:
        faculties = get_services().faculty.list()
        return jsonify([f.to_summary() for f in faculties])
    except Exception:
        return _server_error("Error fetching faculty")


@faculty_bp.route('/<faculty_id>', methods=['GET'])
def get_faculty(faculty_id):
    try:
        faculty = get_services().faculty.get(faculty_id)
        return jsonify(faculty.to_dict())
    except PortalError as e:
        return _error(e)
    except Exception:
        return _server_error("Error fetching faculty")


@faculty_bp.route('/<faculty_id>', methods=['PUT'])
def update_faculty(faculty_id):
    try:
        faculty = get_services().faculty.update(faculty_id, _form_fields(), request.files.get('photo'))
        return jsonify({
            "success": True,
            "message": "Faculty updated successfully!",
            "faculty": faculty.to_dict(),
        })
    except PortalError as e:
        return _error(e)
    except Exception:
        return _server_error("Error updating faculty")


@faculty_bp.route('/<faculty_id>', methods=['DELETE'])
def delete_faculty(faculty_id):
    try:
        get_services().faculty.delete(faculty_id)
    except PortalError as e:
        return _error(e)
    except Exception:
        return _server_error("Error deleting faculty")
    return jsonify({"success": True, "message": "Faculty deleted successfully"})
