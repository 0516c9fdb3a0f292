"""
Blog Blueprint

Home feed and post pages.
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__)

from quill.blog import routes  # noqa: E402, F401
