"""
Image Upload Helper

Saves admin-uploaded images under UPLOAD_FOLDER/<folder>/ and removes files
that are no longer referenced after an edit or delete.
"""

import logging
import os
import random
import re
import time

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

IMAGE_FOLDERS = ('events', 'team', 'partners')
ALLOWED_EXTENSIONS = {'jpeg', 'jpg', 'png', 'gif', 'webp'}
ALLOWED_MIMETYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'}
PUBLIC_PREFIX = '/static/images/'


class InvalidUploadError(ValueError):
    """Uploaded file is not an allowed image."""


def placeholder_url(folder):
    """Default image reference used when nothing was uploaded."""
    return f'{PUBLIC_PREFIX}{folder}/default.svg'


def _generate_filename(original, ext):
    name = os.path.splitext(secure_filename(original))[0]
    slug = re.sub(r'[^a-zA-Z0-9-]', '', re.sub(r'[\s_]+', '-', name)).lower() or 'image'
    suffix = f'{int(time.time() * 1000)}-{random.randint(0, 10**9)}'
    return f'{slug}-{suffix}.{ext}'


def save_image(file_storage, folder):
    """Validate and store an uploaded image.

    Returns the public path to the stored file, or None when no file was
    submitted. Raises InvalidUploadError for anything but an allowed image.
    """
    if folder not in IMAGE_FOLDERS:
        raise ValueError(f'Unknown image folder: {folder}')
    if file_storage is None or not file_storage.filename:
        return None

    ext = os.path.splitext(file_storage.filename)[1].lower().lstrip('.')
    if ext not in ALLOWED_EXTENSIONS or file_storage.mimetype not in ALLOWED_MIMETYPES:
        raise InvalidUploadError('Only image files are allowed (jpeg, jpg, png, gif, webp)')

    destination = os.path.join(current_app.config['UPLOAD_FOLDER'], folder)
    os.makedirs(destination, exist_ok=True)
    filename = _generate_filename(file_storage.filename, ext)
    file_storage.save(os.path.join(destination, filename))
    logger.info('Stored upload %s in %s', filename, destination)
    return f'{PUBLIC_PREFIX}{folder}/{filename}'


def delete_image(image_url):
    """Remove a previously uploaded image.

    Placeholders, external URLs and anything outside the upload folder are
    left alone. Failures are logged, never raised.
    """
    if not image_url or 'default' in image_url or image_url.startswith('http'):
        return False
    if not image_url.startswith(PUBLIC_PREFIX):
        return False

    upload_root = os.path.abspath(current_app.config['UPLOAD_FOLDER'])
    path = os.path.abspath(os.path.join(upload_root, image_url[len(PUBLIC_PREFIX):]))
    if not path.startswith(upload_root + os.sep) or not os.path.exists(path):
        return False

    try:
        os.remove(path)
    except OSError as e:
        logger.error('Error deleting image %s: %s', path, e)
        return False
    logger.info('Deleted old image: %s', path)
    return True
