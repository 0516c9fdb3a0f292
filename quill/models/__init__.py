"""
Models Package

Exports all models for easy importing.
"""

from quill.models.user import User
from quill.models.post import Post

__all__ = ['User', 'Post']
