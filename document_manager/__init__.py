from document_manager.core.config import Settings
from document_manager.core.logging import setup_logging
from document_manager.domains.documents import (
    Author, Document, DocumentError, InvalidDocumentError,
    SearchRequest, DocumentManager
)

__all__ = [
    "Settings", "setup_logging",
    "Author", "Document", "DocumentError", "InvalidDocumentError",
    "SearchRequest", "DocumentManager"
]
