import asyncio
from pathlib import Path

from resume_extraction.storage.base import FileStorage


class LocalFileStorage(FileStorage):
    def __init__(self, base_dir: str, public_url_prefix: str = "") -> None:
        super().__init__(public_url_prefix)
        self.base_dir = Path(base_dir).resolve()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, file_path: str) -> Path:
        abs_path = (self.base_dir / file_path).resolve()
        if not abs_path.is_relative_to(self.base_dir):
            raise FileNotFoundError(f"File not found: {file_path}")
        return abs_path

    async def save(self, file_content: bytes, filename: str, subdir: str = "") -> str:
        target_dir = self.base_dir / subdir
        await asyncio.to_thread(target_dir.mkdir, parents=True, exist_ok=True)
        file_path = target_dir / filename
        await asyncio.to_thread(file_path.write_bytes, file_content)
        return str(Path(subdir) / filename) if subdir else filename

    async def read(self, file_path: str) -> bytes:
        abs_path = self._path_for(file_path)
        if not await asyncio.to_thread(abs_path.is_file):
            raise FileNotFoundError(f"File not found: {file_path}")
        return await asyncio.to_thread(abs_path.read_bytes)

    async def exists(self, file_path: str) -> bool:
        try:
            abs_path = self._path_for(file_path)
        except FileNotFoundError:
            return False
        return await asyncio.to_thread(abs_path.is_file)
