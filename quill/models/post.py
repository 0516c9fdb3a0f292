"""
Post Model
"""

from datetime import datetime

from quill.extensions import db


class Post(db.Model):
    """Blog post owned by exactly one user"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    image = db.Column(db.String(255))  # e.g. /uploads/1718000000000.png
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    author = db.relationship('User', back_populates='posts')

    def __repr__(self):
        return f'<Post {self.id} by User:{self.user_id}>'
