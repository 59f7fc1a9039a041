from .base_source import BaseSource
from .http_source import HttpCategorySource
from .memory_source import InMemorySource
from .models import Category, CategoryList, CategorySourceError, FetchResult, FetchStatus

__all__ = [
    "BaseSource",
    "Category",
    "CategoryList",
    "CategorySourceError",
    "FetchResult",
    "FetchStatus",
    "HttpCategorySource",
    "InMemorySource",
]
