from .search import SearchMatch, search_document

__all__ = [
    "SearchMatch",
    "search_document",
]
