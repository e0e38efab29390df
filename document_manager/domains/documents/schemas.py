from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime


class SearchRequest(BaseModel):
    """Схема для поиска документов.

    Все критерии необязательны и объединяются по И; внутри списка
    достаточно совпадения с любым значением. Пустой список не применяется.
    """
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)

    def is_empty(self) -> bool:
        """Проверка, что ни один критерий не задан"""
        return not (
            self.title_prefixes
            or self.contains_contents
            or self.author_ids
            or self.created_from is not None
            or self.created_to is not None
        )
