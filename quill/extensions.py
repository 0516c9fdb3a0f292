"""
Flask Extensions

Instances are created here and bound to the app in the factory.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_session import Session

# Database instance
db = SQLAlchemy()

# Session-based user authentication
login_manager = LoginManager()

# Server-side session store, kept in the database
server_session = Session()
