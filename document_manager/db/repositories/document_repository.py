import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from document_manager.domains.documents.entities import Document
    from document_manager.domains.documents.schemas import SearchRequest

Condition = Callable[["Document"], bool]


def _as_utc(moment: datetime) -> datetime:
    """Naive время считается временем в UTC"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class InMemoryDocumentRepository:
    """Репозиторий документов в памяти процесса"""

    def __init__(self):
        self._documents: Dict[str, "Document"] = {}
        self._lock = threading.RLock()

    def save(self, document: "Document") -> Tuple["Document", bool]:
        """Вставка или замена документа по его идентификатору.

        Возвращает сохраненный документ и признак замены существующей записи.
        """
        with self._lock:
            replaced = document.id in self._documents
            self._documents[document.id] = document
        return document, replaced

    def get_by_id(self, document_id: str) -> Optional["Document"]:
        """Получение документа по идентификатору"""
        with self._lock:
            return self._documents.get(document_id)

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def search(self, request: Optional["SearchRequest"] = None) -> List["Document"]:
        """Поиск документов"""
        with self._lock:
            documents = list(self._documents.values())

        conditions = self._build_conditions(request) if request is not None else []
        if not conditions:
            return documents

        return [doc for doc in documents if all(cond(doc) for cond in conditions)]

    @staticmethod
    def _build_conditions(request: "SearchRequest") -> List[Condition]:
        conditions: List[Condition] = []

        if request.title_prefixes:
            prefixes = tuple(request.title_prefixes)
            conditions.append(
                lambda doc: doc.title is not None and doc.title.startswith(prefixes)
            )

        if request.contains_contents:
            needles = list(request.contains_contents)
            conditions.append(
                lambda doc: doc.content is not None
                and any(needle in doc.content for needle in needles)
            )

        if request.author_ids:
            author_ids = set(request.author_ids)
            conditions.append(
                lambda doc: doc.author is not None and doc.author.id in author_ids
            )

        if request.created_from is not None:
            created_from = _as_utc(request.created_from)
            conditions.append(
                lambda doc: doc.created is not None and _as_utc(doc.created) >= created_from
            )

        if request.created_to is not None:
            created_to = _as_utc(request.created_to)
            conditions.append(
                lambda doc: doc.created is not None and _as_utc(doc.created) <= created_to
            )

        return conditions
