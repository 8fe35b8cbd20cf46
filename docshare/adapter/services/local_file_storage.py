import logging
import secrets
import time
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from docshare.app.services.file_storage import IFileStorage

logger = logging.getLogger(__name__)


class LocalFileStorage(IFileStorage):
    """
    Stores documents on local disk under upload_dir.

    Stored name: document-<ms timestamp>-<random><original extension>
    """

    def __init__(self, upload_dir: str, field_name: str = "document"):
        self.upload_dir = Path(upload_dir)
        self.field_name = field_name

    def _new_path(self, original_file_name: str) -> Path:
        suffix = Path(original_file_name).suffix.lower()
        unique = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        return self.upload_dir / f"{self.field_name}-{unique}{suffix}"

    async def save(self, content: bytes, original_file_name: str) -> str:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._new_path(original_file_name)
        await run_in_threadpool(path.write_bytes, content)
        logger.info(f"Stored upload {original_file_name!r} at {path}")
        return str(path)

    async def delete(self, file_path: str) -> bool:
        path = Path(file_path)
        if not path.exists():
            return False
        await run_in_threadpool(path.unlink)
        logger.info(f"Removed stored file {path}")
        return True

    def exists(self, file_path: str) -> bool:
        return Path(file_path).is_file()
