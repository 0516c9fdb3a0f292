"""
Quill - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask
from quill.extensions import db, login_manager, server_session
from quill.config import Config
from quill.errors import QuillError


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    app.config.setdefault('SESSION_SQLALCHEMY', db)
    server_session.init_app(app)

    # Register blueprints
    from quill.auth import auth_bp
    from quill.blog import blog_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp)

    # Resolve the session's user id on every request
    @login_manager.user_loader
    def load_user(user_id):
        from quill.models import User
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    @app.errorhandler(QuillError)
    def handle_quill_error(error):
        return error.message, error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}

    # Create upload directory and database tables
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
    with app.app_context():
        from quill import models  # noqa: F401
        db.create_all()

    return app
