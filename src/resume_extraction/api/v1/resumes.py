import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from resume_extraction.api.deps import get_parse_service
from resume_extraction.core.exceptions import ERROR_STATUS_CODES, InvalidRequestError
from resume_extraction.schemas.parse_result import ParseResult
from resume_extraction.schemas.request import DocumentUpload, StoredDocumentRequest
from resume_extraction.services.pipeline import ResumeParseService
from resume_extraction.services.request_validator import validate_document_present

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])


def _respond(result: ParseResult) -> JSONResponse:
    if result.success:
        status_code = status.HTTP_200_OK
    else:
        status_code = ERROR_STATUS_CODES.get(
            result.error_code or "", status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return JSONResponse(content=result.model_dump(mode="json"), status_code=status_code)


@router.post("/parse", response_model=ParseResult)
async def parse_uploaded_resume(
    file: UploadFile | None = File(None),
    caller_id: str = Form(""),
    service: ResumeParseService = Depends(get_parse_service),
) -> JSONResponse:
    """Parse an uploaded resume PDF into a verified profile."""
    try:
        validate_document_present(file)
    except InvalidRequestError as e:
        logger.warning("Rejected upload for caller %s: %s", caller_id, e)
        return _respond(ParseResult.failure(str(e), e.code))

    content = await file.read()
    upload = DocumentUpload(
        content=content,
        media_type=file.content_type or "application/octet-stream",
        byte_size=file.size if file.size is not None else len(content),
        caller_id=caller_id,
    )
    logger.info("Parsing upload %r (%d bytes)", file.filename, upload.size)
    return _respond(await service.parse_document(upload))


@router.post("/parse-stored", response_model=ParseResult)
async def parse_stored_resume(
    request: StoredDocumentRequest,
    service: ResumeParseService = Depends(get_parse_service),
) -> JSONResponse:
    """Parse a resume that is already in document storage."""
    result = await service.parse_stored_document(request.document_reference, request.caller_id)
    return _respond(result)
