from fastapi import Depends

from resume_extraction.core.config import Settings, get_settings
from resume_extraction.services.completion import CompletionClient, GeminiCompletionClient
from resume_extraction.services.pipeline import ResumeParseService
from resume_extraction.services.text_extraction import PdfPlumberTextExtractor, TextExtractor
from resume_extraction.storage.base import FileStorage
from resume_extraction.storage.local import LocalFileStorage

__all__ = [
    "get_completion_client",
    "get_file_storage",
    "get_parse_service",
    "get_settings",
    "get_text_extractor",
]


def get_file_storage() -> FileStorage:
    settings = get_settings()
    return LocalFileStorage(settings.upload_dir, settings.storage_public_url_prefix)


def get_completion_client() -> CompletionClient:
    return GeminiCompletionClient.from_settings(get_settings())


def get_text_extractor() -> TextExtractor:
    return PdfPlumberTextExtractor()


def get_parse_service(
    settings: Settings = Depends(get_settings),
    text_extractor: TextExtractor = Depends(get_text_extractor),
    completion_client: CompletionClient = Depends(get_completion_client),
    storage: FileStorage = Depends(get_file_storage),
) -> ResumeParseService:
    return ResumeParseService(text_extractor, completion_client, settings, storage)
