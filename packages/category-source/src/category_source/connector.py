from typing import TYPE_CHECKING, Any

from category_source.components import BaseSource, FetchResult, HttpCategorySource
from category_source.components.http_source import DEFAULT_ACCEPT, DEFAULT_BASE_URL, DEFAULT_TIMEOUT

if TYPE_CHECKING:
    from category_source.config import Settings


class CategorySource:
    """High-level interface for looking up category children.

    Wraps any :class:`~category_source.components.BaseSource`
    implementation. The default backend is
    :class:`~category_source.components.HttpCategorySource`.

    Example  using as a context manager::

        source = CategorySource(token="secret")
        with source:
            result = source.fetch_children(76)

    Example  with an in-memory backend::

        source = CategorySource(InMemorySource({76: [{"id": 1, "name": "Phones"}]}))
        with source:
            source.fetch_children(76)
    """

    def __init__(
        self,
        backend: BaseSource | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        token: str = "",
        accept: str = DEFAULT_ACCEPT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the source.

        Args:
            backend:  A ready :class:`BaseSource` instance. When omitted an
                      :class:`HttpCategorySource` is built from the
                      remaining arguments.
            base_url: Catalog API root.
            token:    OAuth token sent with every lookup.
            accept:   Value of the ``Accept`` header.
            timeout:  Per-request timeout in seconds.
        """
        if backend is None:
            backend = HttpCategorySource(
                base_url=base_url, token=token, accept=accept, timeout=timeout
            )
        self._backend: BaseSource = backend

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CategorySource":
        """Build an HTTP-backed source from configuration."""
        return cls(
            base_url=settings.catalog_base_url,
            token=settings.catalog_token,
            accept=settings.catalog_accept,
            timeout=settings.catalog_timeout,
        )

    @property
    def backend(self) -> BaseSource:
        return self._backend

    # ------------------------------------------------------------------
    # Connection lifecycle (delegates to the backend)
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Open the backend."""
        self._backend.connect()

    def disconnect(self) -> None:
        """Close the backend."""
        self._backend.disconnect()

    @property
    def is_connected(self) -> bool:
        """Return True when the backend is open."""
        return self._backend.is_connected

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def fetch_children(self, category_id: int) -> FetchResult:
        """Return the children of *category_id* as a :class:`FetchResult`."""
        return self._backend.fetch_children(category_id)

    # ------------------------------------------------------------------
    # Context manager support
    # ------------------------------------------------------------------

    def __enter__(self) -> "CategorySource":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.disconnect()
