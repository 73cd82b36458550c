import os

from flask import Blueprint, current_app, send_from_directory

from .context import get_services

frontend_bp = Blueprint('frontend', __name__)

# URL section -> (folder under FRONTEND_DIR, entry page)
SECTIONS = {
    'login': ('login_folder', 'login.html'),
    'home': ('home_folder', 'page1.html'),
    'faculty': ('faculty_folder', 'frontend.html'),
}


def _section_dir(section):
    folder = SECTIONS[section][0]
    return os.path.join(current_app.config['FRONTEND_DIR'], folder)


@frontend_bp.route('/')
def index():
    return send_from_directory(_section_dir('login'), SECTIONS['login'][1])


@frontend_bp.route('/<any(login, home, faculty):section>', methods=['GET'])
@frontend_bp.route('/<any(login, home, faculty):section>/', methods=['GET'])
@frontend_bp.route('/<any(login, home, faculty):section>/<path:filename>', methods=['GET'])
def section_asset(section, filename=None):
    return send_from_directory(_section_dir(section), filename or SECTIONS[section][1])


@frontend_bp.route('/faculty_uploadss/<path:filename>')
def uploaded_photo(filename):
    return send_from_directory(get_services().photos.upload_dir, filename)
