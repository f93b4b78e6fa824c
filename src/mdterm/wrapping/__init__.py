from .wrapping import word_wrap

__all__ = [
    "word_wrap",
]
