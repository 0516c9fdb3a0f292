"""
Blog Routes

Home feed, post detail and the owner-only post lifecycle.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for, send_from_directory
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from quill.blog import blog_bp
from quill.blog import services
from quill.blog.uploads import save_image, discard_image
from quill.errors import NotFoundError, ServerError
from quill.extensions import db

logger = logging.getLogger(__name__)


@blog_bp.route('/')
def home():
    """Home feed with a randomly featured post"""
    try:
        featured_post = services.list_featured()
        posts = services.list_all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error fetching posts')
        raise ServerError('Server error') from e

    return render_template('home.html', featured_post=featured_post, posts=posts)


@blog_bp.route('/post', methods=['GET', 'POST'])
@login_required
def new_post():
    """Create a post with an optional image"""
    if request.method == 'POST':
        try:
            image_path = save_image(request.files.get('image'))
            services.create_post(
                current_user.id,
                request.form.get('title', ''),
                request.form.get('content', ''),
                image_path,
            )
        except (SQLAlchemyError, OSError) as e:
            db.session.rollback()
            logger.exception('Post creation failed')
            raise ServerError('Failed to create post.') from e

        return redirect(url_for('blog.home'))

    return render_template('blog/new_post.html')


@blog_bp.route('/myposts')
@login_required
def my_posts():
    """Posts owned by the current user"""
    try:
        posts = services.list_mine(current_user.id)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error fetching posts')
        raise ServerError('Server error') from e

    return render_template('blog/my_posts.html', posts=posts, owner_actions=True)


@blog_bp.route('/post/edit/<int:post_id>', methods=['GET', 'POST'])
@login_required
def edit_post(post_id):
    """Edit form and submission, owner only"""
    if request.method == 'POST':
        image_path = None
        try:
            image_path = save_image(request.files.get('image'))
            updated = services.update_post(
                current_user.id,
                post_id,
                request.form.get('title', ''),
                request.form.get('content', ''),
                image_path,
            )
        except (SQLAlchemyError, OSError) as e:
            db.session.rollback()
            logger.exception('Error updating post %s', post_id)
            raise ServerError('Error updating post.') from e

        if not updated:
            discard_image(image_path)
            raise NotFoundError('Post not found or unauthorized.')
        return redirect(url_for('blog.my_posts'))

    try:
        post = services.get_owned(current_user.id, post_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error loading post %s for edit', post_id)
        raise ServerError('Error loading post for edit.') from e

    return render_template('blog/edit_post.html', post=post)


@blog_bp.route('/post/delete/<int:post_id>', methods=['POST'])
@login_required
def delete_post(post_id):
    """Delete a post, owner only; unknown ids are ignored"""
    try:
        services.delete_post(current_user.id, post_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error deleting post %s', post_id)
        raise ServerError('Error deleting post.') from e

    return redirect(url_for('blog.my_posts'))


@blog_bp.route('/posts/<int:post_id>')
def post_detail(post_id):
    """Public single post page"""
    try:
        post = services.get_one(post_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error fetching post %s', post_id)
        raise ServerError('Server error') from e

    return render_template('blog/post_detail.html', post=post)


@blog_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
