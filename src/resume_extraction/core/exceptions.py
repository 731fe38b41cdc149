class ResumeParseError(Exception):
    """Base class for hard failures that abort a parse request."""

    code = "ParseError"
    status_code = 500


class InvalidRequestError(ResumeParseError):
    code = "InvalidRequest"
    status_code = 400


class UnsupportedFormatError(ResumeParseError):
    code = "UnsupportedFormat"
    status_code = 415


class PayloadTooLargeError(ResumeParseError):
    code = "PayloadTooLarge"
    status_code = 413


class ExtractionFailedError(ResumeParseError):
    """Raised when text extraction from a document fails."""

    code = "ExtractionFailed"
    status_code = 422


class InsufficientTextError(ResumeParseError):
    """Raised when a document yields too little text to be worth parsing."""

    code = "InsufficientText"
    status_code = 422


class CompletionFailedError(ResumeParseError):
    code = "CompletionFailed"
    status_code = 502


class RateLimitedError(ResumeParseError):
    code = "RateLimited"
    status_code = 429


class MalformedCompletionError(ResumeParseError):
    """Raised when the model returns something that is not a JSON object."""

    code = "MalformedCompletion"
    status_code = 502


ERROR_STATUS_CODES: dict[str, int] = {
    cls.code: cls.status_code
    for cls in (
        InvalidRequestError,
        UnsupportedFormatError,
        PayloadTooLargeError,
        ExtractionFailedError,
        InsufficientTextError,
        CompletionFailedError,
        RateLimitedError,
        MalformedCompletionError,
    )
}
