# ============================================================================
# FILE: songbook/core/file_store.py
# Uploaded audio blobs on local disk, keyed by original filename
# ============================================================================
import os
import shutil
import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)

class FileStore:
    """Directory-backed blob store"""

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def ensure(self):
        """Create the upload directory if it is missing"""
        os.makedirs(self.root, exist_ok=True)

    @staticmethod
    def safe_name(filename: str) -> str:
        """
        Strip any client-supplied directory parts from a filename

        Returns "" when nothing usable is left (".", "..", trailing slash).
        """
        name = os.path.basename((filename or "").replace("\\", "/"))
        if name in (".", ".."):
            return ""
        return name

    def path_for(self, filename: str) -> str:
        return os.path.join(self.root, self.safe_name(filename))

    def exists(self, filename: str) -> bool:
        return os.path.isfile(self.path_for(filename))

    def save(self, filename: str, source: BinaryIO) -> str:
        """Write a blob, replacing any existing blob with the same name"""
        if not self.safe_name(filename):
            raise ValueError(f"Not a storable file name: {filename!r}")
        path = self.path_for(filename)
        source.seek(0)
        with open(path, "wb") as buffer:
            shutil.copyfileobj(source, buffer)
        logger.info(f"Blob stored: {os.path.basename(path)}")
        return path

    def delete(self, filename: str) -> bool:
        """
        Remove a blob if present

        Returns False when there was nothing to delete. Other OS errors propagate.
        """
        path = self.path_for(filename)
        if not os.path.isfile(path):
            return False
        os.remove(path)
        logger.info(f"Blob deleted: {os.path.basename(path)}")
        return True
