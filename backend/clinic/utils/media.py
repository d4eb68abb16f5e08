import os
import time
from werkzeug.utils import secure_filename
from flask import current_app
from clinic.domain.invariants.exceptions import UploadError

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS

def bucket_root():
    return os.path.join(
        current_app.config.get('UPLOAD_FOLDER', 'uploads'),
        current_app.config.get('CONTENT_BUCKET', 'website-images'),
    )

def object_path_for(filename, *, purpose, entity, timestamp_ms=None):
    """
    Build the bucket path for an upload:
    <purpose>-images/<entity>-<timestamp>.<ext>
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    ext = secure_filename(filename).rsplit('.', 1)[1].lower()
    return f"{purpose}-images/{entity}-{timestamp_ms}.{ext}"

def public_url(object_path):
    base = current_app.config.get('MEDIA_PUBLIC_URL', '/media').rstrip('/')
    bucket = current_app.config.get('CONTENT_BUCKET', 'website-images')
    return f"{base}/{bucket}/{object_path}"

def upload_image(file, *, purpose, entity):
    """
    Store an uploaded image in the content bucket and return its public URL.
    Existing objects at the same path are overwritten.
    """
    if not file or not file.filename or not allowed_file(file.filename):
        raise UploadError("File type not allowed")

    object_path = object_path_for(file.filename, purpose=purpose, entity=entity)
    file_path = os.path.join(bucket_root(), object_path)

    try:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        file.save(file_path)
    except OSError as e:
        current_app.logger.error(f"Failed to store upload {object_path}: {e}")
        raise UploadError(f"Failed to upload image: {e}") from e

    return public_url(object_path)
