"""
Auth Blueprint

Registration, login and logout.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from quill.auth import routes  # noqa: E402, F401
