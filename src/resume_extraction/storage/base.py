from abc import ABC, abstractmethod
from pathlib import PurePosixPath


class FileStorage(ABC):
    def __init__(self, public_url_prefix: str = "") -> None:
        self.public_url_prefix = public_url_prefix

    def resolve_reference(self, document_reference: str) -> str:
        """Map a document reference (public URL or relative path) to a storage path."""
        reference = document_reference.strip()
        if self.public_url_prefix and reference.startswith(self.public_url_prefix):
            reference = reference[len(self.public_url_prefix):]
        return reference.lstrip("/")

    @staticmethod
    def suffix_of(file_path: str) -> str:
        return PurePosixPath(file_path).suffix.lower()

    @abstractmethod
    async def save(self, file_content: bytes, filename: str, subdir: str = "") -> str:
        """Save file and return the relative file path."""
        ...

    @abstractmethod
    async def read(self, file_path: str) -> bytes:
        """Return the stored bytes; raise FileNotFoundError if missing."""
        ...

    @abstractmethod
    async def exists(self, file_path: str) -> bool:
        """Check if a file exists in storage."""
        ...
