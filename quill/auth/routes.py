"""
Auth Routes

User authentication routes using Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, session
from flask_login import login_user, logout_user, current_user
from sqlalchemy.exc import SQLAlchemyError

from quill.auth import auth_bp
from quill.auth.services import register_user, authenticate
from quill.errors import AuthError, ServerError, ValidationError
from quill.extensions import db

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'POST':
        try:
            register_user(
                request.form.get('name', '').strip(),
                request.form.get('email', '').strip(),
                request.form.get('password', ''),
                request.form.get('confirmP', ''),
            )
        except ValidationError as e:
            flash(e.message, 'danger')
            return render_template('auth/register.html'), e.status_code
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Registration error')
            raise ServerError('Error registering user') from e

        flash('Registration successful! Please login.', 'success')
        return redirect(url_for('auth.login'))

    return render_template('auth/register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        try:
            user = authenticate(email, password)
        except AuthError as e:
            flash(e.message, 'danger')
            return render_template('auth/login.html'), e.status_code
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Login error')
            raise ServerError('Server error') from e

        login_user(user)
        logger.info('User %s logged in', user.id)
        return redirect(url_for('blog.home'))

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Drop the session, whether or not one was authenticated"""
    if current_user.is_authenticated:
        logger.info('User %s logged out', current_user.id)
    logout_user()
    # An emptied session deletes its server-side record
    session.clear()
    return redirect(url_for('blog.home'))
