"""
Blog Services

Post queries and owner-scoped mutations.

Update and delete carry both the post id and the acting user's id in a
single statement, so a post is never fetched first and compared afterwards.
"""

import logging

from sqlalchemy import func
from sqlalchemy.orm import contains_eager

from quill.errors import NotFoundError
from quill.extensions import db
from quill.models import Post, User

logger = logging.getLogger(__name__)


def _with_author():
    return Post.query.join(Post.author).options(contains_eager(Post.author))


def list_all():
    """All posts, newest first."""
    return _with_author().order_by(Post.id.desc()).all()


def list_featured():
    """One post picked uniformly at random, or None when there are none."""
    return _with_author().order_by(func.random()).first()


def list_mine(user_id):
    return _with_author().filter(User.id == user_id).order_by(Post.id.desc()).all()


def get_one(post_id):
    """Any post by id; posts are public."""
    post = _with_author().filter(Post.id == post_id).first()
    if post is None:
        raise NotFoundError('Post not found')
    return post


def get_owned(user_id, post_id):
    """Post ``post_id`` if it belongs to ``user_id``."""
    post = Post.query.filter_by(id=post_id, user_id=user_id).first()
    if post is None:
        raise NotFoundError('Post not found or unauthorized.')
    return post


def create_post(user_id, title, content, image_path=None):
    post = Post(title=title, content=content, image=image_path, user_id=user_id)
    db.session.add(post)
    db.session.commit()
    logger.info('User %s created post %s', user_id, post.id)
    return post


def update_post(user_id, post_id, title, content, image_path=None):
    """Rewrite title and content, and the image only when a new one is given.

    Returns:
        True if a post matched ``(post_id, user_id)``.
    """
    values = {Post.title: title, Post.content: content}
    if image_path:
        values[Post.image] = image_path

    matched = Post.query.filter_by(id=post_id, user_id=user_id)\
        .update(values, synchronize_session=False)
    db.session.commit()

    if matched:
        logger.info('User %s updated post %s', user_id, post_id)
    return matched > 0


def delete_post(user_id, post_id):
    """Delete the post if ``user_id`` owns it; otherwise nothing happens."""
    deleted = Post.query.filter_by(id=post_id, user_id=user_id)\
        .delete(synchronize_session=False)
    db.session.commit()

    if deleted:
        logger.info('User %s deleted post %s', user_id, post_id)
    return deleted > 0
