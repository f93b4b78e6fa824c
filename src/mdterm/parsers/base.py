# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, content: str) -> ParsedDocument:
        """
        Parse raw markup and return an immutable, line-oriented document.

        Requirements:
        - Total: never raises on any input text
        - Deterministic output for same input
        - Whole document re-parsed on every call
        """
        raise NotImplementedError
