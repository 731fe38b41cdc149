import logging

from resume_extraction.core.config import Settings
from resume_extraction.core.exceptions import (
    ExtractionFailedError,
    InsufficientTextError,
    MalformedCompletionError,
    ResumeParseError,
)
from resume_extraction.schemas.parse_result import DroppedItem, ParseResult
from resume_extraction.schemas.profile import ExtractedProfile
from resume_extraction.schemas.request import DocumentUpload
from resume_extraction.services.completion import CompletionClient
from resume_extraction.services.date_normalizer import normalize_profile_dates
from resume_extraction.services.prompt_builder import build_extraction_prompt
from resume_extraction.services.provenance import validate_profile_with_report
from resume_extraction.services.request_validator import (
    validate_caller,
    validate_parse_request,
    validate_upload,
)
from resume_extraction.services.schema_coercer import coerce_completion
from resume_extraction.services.text_extraction import TextExtractor
from resume_extraction.storage.base import FileStorage

logger = logging.getLogger(__name__)

MEDIA_TYPES_BY_SUFFIX: dict[str, str] = {".pdf": "application/pdf"}

INTERNAL_ERROR = "Internal error while parsing resume"


class ResumeParseService:
    """Runs one resume through extraction, completion and provenance checks.

    The service holds no per-request state, so a single instance can serve
    concurrent requests. Hard failures come back as ``ParseResult`` with
    ``success=False``; nothing is raised past ``parse_document``.
    """

    def __init__(
        self,
        text_extractor: TextExtractor,
        completion_client: CompletionClient,
        settings: Settings,
        storage: FileStorage | None = None,
    ) -> None:
        self.text_extractor = text_extractor
        self.completion_client = completion_client
        self.settings = settings
        self.storage = storage

    async def parse_document(self, upload: DocumentUpload) -> ParseResult:
        try:
            profile, dropped = await self._run(upload)
        except ResumeParseError as e:
            return self._failure(e, upload.caller_id)
        except Exception:
            logger.exception("Unexpected failure parsing resume for caller %s", upload.caller_id)
            return ParseResult.failure(INTERNAL_ERROR)

        logger.info(
            "Parsed resume for caller %s: %d experience, %d education, %d projects, "
            "%d skills, %d values dropped",
            upload.caller_id,
            len(profile.experience),
            len(profile.education),
            len(profile.projects),
            len(profile.skills),
            len(dropped),
        )
        return ParseResult.ok(profile, dropped)

    async def parse_stored_document(
        self, document_reference: str | None, caller_id: str | None
    ) -> ParseResult:
        """Load a document from storage by reference and parse it."""
        try:
            upload = await self._load_stored(document_reference, caller_id)
        except ResumeParseError as e:
            return self._failure(e, caller_id)
        except Exception:
            logger.exception("Unexpected failure loading %r", document_reference)
            return ParseResult.failure(INTERNAL_ERROR)
        return await self.parse_document(upload)

    async def _load_stored(
        self, document_reference: str | None, caller_id: str | None
    ) -> DocumentUpload:
        validate_parse_request(document_reference, caller_id)
        if self.storage is None:
            raise ExtractionFailedError("No document storage is configured")

        file_path = self.storage.resolve_reference(document_reference)
        if not await self.storage.exists(file_path):
            raise ExtractionFailedError(f"Failed to download file: File not found: {file_path}")

        logger.info("Downloading file from storage: %s", file_path)
        try:
            content = await self.storage.read(file_path)
        except FileNotFoundError as e:
            raise ExtractionFailedError(f"Failed to download file: {e}") from e

        media_type = MEDIA_TYPES_BY_SUFFIX.get(
            self.storage.suffix_of(file_path), "application/octet-stream"
        )
        return DocumentUpload(content=content, media_type=media_type, caller_id=caller_id)

    async def _run(self, upload: DocumentUpload) -> tuple[ExtractedProfile, list[DroppedItem]]:
        settings = self.settings
        validate_caller(upload.caller_id)
        validate_upload(
            upload.media_type,
            upload.size,
            accepted_media_type=settings.accepted_media_type,
            max_bytes=settings.max_upload_bytes,
        )

        extracted = await self.text_extractor.extract(upload.content)
        source_text = extracted.text
        if not source_text or len(source_text.strip()) < settings.min_text_length:
            raise InsufficientTextError(
                "Could not extract sufficient text from PDF. "
                "File may be corrupted or image-based."
            )

        prompt = build_extraction_prompt(source_text)
        raw = await self.completion_client.complete(
            prompt.system_prompt,
            prompt.user_prompt,
            temperature=settings.completion_temperature,
            json_mode=True,
        )

        try:
            profile = coerce_completion(raw)
        except MalformedCompletionError:
            logger.error("Malformed completion (%d chars): %.200r", len(raw or ""), raw)
            raise

        validated, dropped = validate_profile_with_report(
            profile, source_text, strict=settings.strict_field_checks
        )
        if settings.normalize_dates:
            validated = normalize_profile_dates(validated)
        return validated, dropped

    @staticmethod
    def _failure(error: ResumeParseError, caller_id: str | None) -> ParseResult:
        if not isinstance(error, MalformedCompletionError):
            logger.warning("Resume parse failed for caller %s [%s]: %s", caller_id, error.code, error)
        return ParseResult.failure(str(error), error.code)

