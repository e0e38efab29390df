from datetime import datetime, timezone

import pytest

from document_manager.core.config import Settings
from document_manager.domains.documents import Author, Document, DocumentManager


@pytest.fixture
def manager() -> DocumentManager:
    return DocumentManager(settings=Settings(validate_documents=False))


@pytest.fixture
def validating_manager() -> DocumentManager:
    return DocumentManager(settings=Settings(validate_documents=True))


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def make_document(now: datetime):
    def _make(
        title: str = "Document Name",
        content: str = "Content text",
        author_id: str = "1",
        created: datetime = None,
        document_id: str = None,
    ) -> Document:
        return Document(
            id=document_id,
            title=title,
            content=content,
            author=Author(id=author_id, name=f"Author {author_id}"),
            created=created or now,
        )

    return _make
