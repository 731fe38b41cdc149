from resume_extraction.core.exceptions import (
    InvalidRequestError,
    PayloadTooLargeError,
    UnsupportedFormatError,
)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_caller(caller_id: str | None) -> None:
    if _is_blank(caller_id):
        raise InvalidRequestError("caller_id is required")


def validate_parse_request(document_reference: str | None, caller_id: str | None) -> None:
    """Check that a stored-document request names both a document and a caller."""
    if _is_blank(document_reference) and _is_blank(caller_id):
        raise InvalidRequestError("document_reference and caller_id are required")
    if _is_blank(document_reference):
        raise InvalidRequestError("document_reference is required")
    validate_caller(caller_id)


def _base_media_type(media_type: str) -> str:
    return media_type.split(";", 1)[0].strip().lower()


def validate_upload(
    media_type: str | None,
    byte_size: int,
    *,
    accepted_media_type: str,
    max_bytes: int,
) -> None:
    if not media_type or _base_media_type(media_type) != accepted_media_type.lower():
        raise UnsupportedFormatError(
            f"File type '{media_type or 'unknown'}' not allowed. Allowed: {accepted_media_type}"
        )
    if byte_size <= 0:
        raise InvalidRequestError("Uploaded file is empty")
    if byte_size > max_bytes:
        raise PayloadTooLargeError(
            f"File size exceeds maximum of {max_bytes // (1024 * 1024)}MB"
        )


def validate_document_present(document: object | None) -> None:
    if document is None:
        raise InvalidRequestError("file is required")
