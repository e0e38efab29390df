from document_manager.db.repositories.document_repository import InMemoryDocumentRepository

__all__ = [
    "InMemoryDocumentRepository",
]
