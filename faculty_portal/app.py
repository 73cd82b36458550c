import logging
import os

import click
from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .auth import auth_bp
from .auth_service import AuthService
from .context import EXTENSION_KEY, Services
from .faculty_api import faculty_bp
from .faculty_service import FacultyService
from .frontend import frontend_bp
from .models import db
from .security import DEFAULT_METHOD, PasswordHasher
from .stores import FacultyStore, UserStore
from .uploads import PhotoStorage


def _load_config(app):
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///faculty_portal.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['FRONTEND_URL'] = os.getenv('FRONTEND_URL', 'http://localhost:3000')
    app.config['PORT'] = int(os.getenv('PORT', '5000'))
    app.config['UPLOAD_FOLDER'] = os.getenv('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'faculty_uploadss'))
    app.config['FRONTEND_DIR'] = os.getenv('FRONTEND_DIR', os.path.join(os.getcwd(), 'frontend'))
    app.config['PASSWORD_HASH_METHOD'] = os.getenv('PASSWORD_HASH_METHOD', DEFAULT_METHOD)
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')


def _configure_logging(app):
    level = getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('faculty_portal').setLevel(level)
    app.logger.setLevel(level)


def create_app(config=None):
    load_dotenv()
    app = Flask(__name__, instance_relative_config=True)
    _load_config(app)
    if config:
        app.config.update(config)
    os.makedirs(app.instance_path, exist_ok=True)

    _configure_logging(app)

    CORS(
        app,
        origins=[app.config['FRONTEND_URL']],
        methods=['GET', 'POST', 'PUT', 'DELETE'],
        supports_credentials=True,
    )

    db.init_app(app)
    with app.app_context():
        db.create_all()

    photos = PhotoStorage(app.config['UPLOAD_FOLDER'])
    app.extensions[EXTENSION_KEY] = Services(
        auth=AuthService(UserStore(db.session), PasswordHasher(app.config['PASSWORD_HASH_METHOD'])),
        faculty=FacultyService(FacultyStore(db.session), photos),
        photos=photos,
    )

    app.register_blueprint(auth_bp)
    app.register_blueprint(faculty_bp)
    app.register_blueprint(frontend_bp)

    @app.cli.command('init-db')
    def init_db_command():
        """Create the users and faculty tables if they are missing."""
        db.create_all()
        click.echo('Initialized the database.')

    return app


def main():
    app = create_app()
    port = app.config['PORT']
    app.logger.info("Server running on port %s", port)
    app.logger.info("Frontend allowed: %s", app.config['FRONTEND_URL'])
    app.run(host='0.0.0.0', port=port)


if __name__ == '__main__':
    main()
