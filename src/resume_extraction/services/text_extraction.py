import asyncio
import io
import logging
from abc import ABC, abstractmethod
from typing import NamedTuple

import pdfplumber

from resume_extraction.core.exceptions import ExtractionFailedError

logger = logging.getLogger(__name__)


class ExtractedText(NamedTuple):
    text: str
    page_count: int


class TextExtractor(ABC):
    @abstractmethod
    async def extract(self, data: bytes) -> ExtractedText:
        """Turn raw document bytes into one merged text string."""
        ...


def extract_text_from_pdf(data: bytes) -> ExtractedText:
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
            return ExtractedText("\n\n".join(pages).strip(), len(pages))
    except Exception as e:
        raise ExtractionFailedError(f"PDF extraction failed: {e}") from e


class PdfPlumberTextExtractor(TextExtractor):
    async def extract(self, data: bytes) -> ExtractedText:
        result = await asyncio.to_thread(extract_text_from_pdf, data)
        logger.info(
            "Extracted %d characters from %d pages", len(result.text), result.page_count
        )
        return result
