from pydantic import BaseModel, ConfigDict


class DocumentUpload(BaseModel):
    """A resume file handed to the parser along with who uploaded it."""

    model_config = ConfigDict(frozen=True)

    content: bytes
    media_type: str
    caller_id: str
    byte_size: int | None = None

    @property
    def size(self) -> int:
        return self.byte_size if self.byte_size is not None else len(self.content)


class StoredDocumentRequest(BaseModel):
    document_reference: str = ""
    caller_id: str = ""
