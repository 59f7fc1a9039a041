from category_source import CategorySource, FetchStatus
from category_source.config import settings


def health_check() -> str:
    """Look up one category to prove the catalog answers.

    A not-found answer still counts as healthy; only a transport error fails.
    """
    source = CategorySource.from_settings(settings)
    with source:
        result = source.fetch_children(settings.catalog_health_category_id)
    if result.status == FetchStatus.TRANSPORT_ERROR:
        raise RuntimeError(result.detail)
    return "ok"
