# smartreplace/utils/__init__.py
from .distance import interior_similarity, levenshtein, similarity
from .gitignore import get_gitignore

__all__ = [
    "levenshtein",
    "similarity",
    "interior_similarity",
    "get_gitignore",
]
