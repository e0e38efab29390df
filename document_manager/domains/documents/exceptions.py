from typing import List


class DocumentError(Exception):
    """Базовая ошибка домена Documents"""


class InvalidDocumentError(DocumentError):
    """Документ не содержит обязательных полей"""

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(f"Invalid document, missing fields: {', '.join(self.fields)}")
