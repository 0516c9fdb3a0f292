"""
Image Uploads

Post images are written to UPLOAD_FOLDER under a millisecond timestamp name
that keeps the original extension.
"""

import logging
import os
import time

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

URL_PREFIX = '/uploads/'


def save_image(file):
    """Store an uploaded image and return its public path.

    Returns None when the form carried no file.
    """
    if file is None or not file.filename:
        return None

    extension = os.path.splitext(secure_filename(file.filename))[1].lower()
    filename = f'{int(time.time() * 1000)}{extension}'
    filepath = os.path.join(current_app.config['UPLOAD_FOLDER'], filename)

    file.save(filepath)
    logger.info('Stored upload %s', filename)
    return URL_PREFIX + filename


def discard_image(image_path):
    """Remove a file previously returned by save_image."""
    if not image_path or not image_path.startswith(URL_PREFIX):
        return

    filename = secure_filename(image_path[len(URL_PREFIX):])
    filepath = os.path.join(current_app.config['UPLOAD_FOLDER'], filename)
    try:
        os.remove(filepath)
    except FileNotFoundError:
        pass
