from collections.abc import Generator
from typing import Annotated

from fastapi import Depends

from category_source import CategorySource
from category_source.config import settings as catalog_settings


def get_source() -> Generator[CategorySource, None, None]:
    """FastAPI dependency that opens and closes a CategorySource per request."""
    source = CategorySource.from_settings(catalog_settings)
    with source:
        yield source


Source = Annotated[CategorySource, Depends(get_source)]
