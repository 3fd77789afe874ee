"""
utils/uploads.py
-----------------
Stores uploaded profile images on disk and hands back the public path
the employee record keeps.
"""

import logging
import os
import uuid

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "profileImage"
URL_PREFIX = "/uploads"


class UploadHandler:

    def __init__(self, folder):
        self.folder = folder

    def get_upload(self, files):
        """Pick the single profile image out of request.files, if any."""
        upload = files.get(UPLOAD_FIELD)
        if upload is None or not upload.filename:
            return None
        return upload

    def save(self, upload):
        """Write the upload under a generated name and return /uploads/<name>."""
        os.makedirs(self.folder, exist_ok=True)

        _, ext = os.path.splitext(secure_filename(upload.filename))
        filename = f"{uuid.uuid4().hex}{ext.lower()}"
        upload.save(os.path.join(self.folder, filename))

        logger.info("Stored upload %s as %s", upload.filename, filename)
        return f"{URL_PREFIX}/{filename}"
