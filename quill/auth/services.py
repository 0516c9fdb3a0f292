"""
Auth Services

Credential checks and user creation. Both calls return the user or raise.
"""

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from quill.errors import AuthError, ConflictError, ValidationError
from quill.extensions import db
from quill.models import User

logger = logging.getLogger(__name__)


def register_user(username, email, password, confirm_password):
    """Create a user with a salted password hash.

    Raises:
        ValidationError: a field is empty or the passwords differ.
        ConflictError: the store rejected the insert.
    """
    if not username or not email or not password:
        raise ValidationError('Name, email and password are required.')

    if password != confirm_password:
        raise ValidationError('Passwords do not match!')

    user = User(
        username=username,
        email=email,
        password_hash=generate_password_hash(password, method='pbkdf2:sha256'),
    )
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.exception('Store rejected new user %s', email)
        raise ConflictError('Error registering user') from e

    logger.info('Registered user %s', user.id)
    return user


def authenticate(email, password):
    """Return the user owning ``email`` if ``password`` verifies."""
    user = User.query.filter_by(email=email).order_by(User.id).first()

    if user is None or not check_password_hash(user.password_hash, password or ''):
        logger.warning('Failed login attempt for %s', email)
        raise AuthError('Invalid email or password')

    return user
