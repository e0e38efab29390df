import logging
import uuid
from typing import List, Optional

from document_manager.core.config import Settings, settings as default_settings
from document_manager.db.repositories.document_repository import InMemoryDocumentRepository
from document_manager.domains.documents.entities import Document
from document_manager.domains.documents.exceptions import InvalidDocumentError
from document_manager.domains.documents.schemas import SearchRequest

logger = logging.getLogger(__name__)


class DocumentManager:
    """Сервис для работы с документами"""

    def __init__(
        self,
        repository: Optional[InMemoryDocumentRepository] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or default_settings
        self.document_repository = repository or InMemoryDocumentRepository()

    def save(self, document: Document) -> Document:
        """Сохранение документа: создание нового или замена существующего"""
        if self.settings.validate_documents:
            missing = document.missing_fields()
            if missing:
                logger.warning(f"Rejected document {document.id}: missing {missing}")
                raise InvalidDocumentError(missing)

        if not document.id:
            document = document.with_id(str(uuid.uuid4()))

        saved, replaced = self.document_repository.save(document)
        logger.info(f"{'Updated' if replaced else 'Created'} document {saved.id}")
        return saved

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по идентификатору"""
        document = self.document_repository.get_by_id(document_id)
        if document is None:
            logger.debug(f"Document {document_id} not found")
        return document

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Поиск документов по критериям запроса"""
        documents = self.document_repository.search(request)
        logger.debug(f"Search matched {len(documents)} documents")
        return documents

    def count(self) -> int:
        return self.document_repository.count()
