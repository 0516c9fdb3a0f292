"""
Configuration settings for Quill
"""
import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class Config:
    """Flask application configuration"""

    # Flask secret key
    SECRET_KEY = os.environ.get('SESSION_SECRET') or 'dev-session-secret-change-in-production'

    # PostgreSQL connection
    SQLALCHEMY_DATABASE_URI = URL.create(
        'postgresql+psycopg2',
        username=os.environ.get('PG_USER') or 'postgres',
        password=os.environ.get('PG_PASSWORD') or None,
        host=os.environ.get('PG_HOST') or 'localhost',
        port=int(os.environ.get('PG_PORT') or 5432),
        database=os.environ.get('PG_DATABASE') or 'quill',
    ).render_as_string(hide_password=False)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Sessions live in the database; the cookie only carries the session id
    SESSION_TYPE = 'sqlalchemy'
    SESSION_SQLALCHEMY_TABLE = 'sessions'
    SESSION_PERMANENT = False

    # Uploaded post images, served at /uploads/<filename>
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    UPLOAD_FOLDER = os.path.join(basedir, 'uploads')


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-session-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
