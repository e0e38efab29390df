from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Author:
    """Автор документа"""
    id: str
    name: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """Сущность документа. Идентификатор назначается при сохранении, если не задан"""
    title: str
    content: str
    author: Optional[Author]
    created: Optional[datetime]
    id: Optional[str] = None

    def with_id(self, document_id: str) -> "Document":
        """Копия документа с указанным идентификатором"""
        return replace(self, id=document_id)

    def missing_fields(self) -> List[str]:
        """Список незаполненных обязательных полей"""
        missing = []
        if self.author is None:
            missing.append("author")
        elif not self.author.id:
            missing.append("author.id")
        if self.created is None:
            missing.append("created")
        return missing

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title})"
