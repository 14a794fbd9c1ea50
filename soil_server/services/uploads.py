"""
Staging of uploaded report images into the image directory
"""
from fastapi import UploadFile
from typing import Optional
import logging
import os
import shutil
import time

logger = logging.getLogger(__name__)

def stage_upload(upload: Optional[UploadFile], image_dir: str) -> Optional[str]:
    """Write ``upload`` to ``image_dir`` and return the generated filename.

    Names are the receipt time in epoch milliseconds plus the original
    extension, e.g. ``1717243200123.png``. Returns None when nothing was
    uploaded.
    """
    if upload is None or not upload.filename:
        return None

    os.makedirs(image_dir, exist_ok=True)
    extension = os.path.splitext(upload.filename)[1]
    stamp = int(time.time() * 1000)
    while True:
        filename = f"{stamp}{extension}"
        path = os.path.join(image_dir, filename)
        try:
            target = open(path, "xb")
            break
        except FileExistsError:
            stamp += 1

    try:
        with target:
            shutil.copyfileobj(upload.file, target)
    except Exception:
        logger.error(f"Failed to store uploaded image {upload.filename}, removing {filename}")
        os.remove(path)
        raise
    logger.info(f"Stored uploaded image {upload.filename} as {filename}")
    return filename
