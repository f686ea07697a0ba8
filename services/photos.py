"""
Disk storage for photos attached to reports.
"""
import logging
import os
import random
import time

logger = logging.getLogger(__name__)

URL_PREFIX = '/uploads/'


def has_photo(upload):
    return upload is not None and bool(upload.filename)


def generate_filename(original_name):
    """Unique name built from submission time and a random part, keeping the extension."""
    ext = os.path.splitext(original_name or '')[1]
    # Only plain ASCII alphanumeric extensions make it into the stored name
    if not (ext[1:].isascii() and ext[1:].isalnum()):
        ext = ''
    return f"photo-{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}{ext}"


def save_photo(upload, upload_folder):
    """Write an uploaded file to disk and return its public reference."""
    filename = generate_filename(upload.filename)
    upload.save(os.path.join(upload_folder, filename))
    logger.info(f"Stored photo {filename}")
    return URL_PREFIX + filename


def remove_photo(reference, upload_folder):
    if not reference or not reference.startswith(URL_PREFIX):
        return
    path = os.path.join(upload_folder, reference[len(URL_PREFIX):])
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    else:
        logger.info(f"Removed orphaned photo {path}")
