from category_source.components import (
    BaseSource,
    Category,
    CategorySourceError,
    FetchResult,
    FetchStatus,
    HttpCategorySource,
    InMemorySource,
)
from category_source.connector import CategorySource

__all__ = [
    "BaseSource",
    "Category",
    "CategorySource",
    "CategorySourceError",
    "FetchResult",
    "FetchStatus",
    "HttpCategorySource",
    "InMemorySource",
]
