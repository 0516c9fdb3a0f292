"""
User Model
"""

from datetime import datetime

from flask_login import UserMixin
from quill.extensions import db


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), nullable=False)
    # Looked up on login; uniqueness is left to the database
    email = db.Column(db.String(120), nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationship to authored posts
    posts = db.relationship('Post', back_populates='author', lazy=True)

    def __repr__(self):
        return f'<User {self.username}>'
