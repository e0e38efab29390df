from document_manager.domains.documents.entities import Author, Document
from document_manager.domains.documents.exceptions import DocumentError, InvalidDocumentError
from document_manager.domains.documents.schemas import SearchRequest
from document_manager.domains.documents.services import DocumentManager

__all__ = [
    "Author", "Document",
    "DocumentError", "InvalidDocumentError",
    "SearchRequest",
    "DocumentManager"
]
