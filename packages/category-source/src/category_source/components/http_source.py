import logging

import requests
from pydantic import ValidationError

from .base_source import BaseSource
from .models import CategoryList, FetchResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://skroutz.gr/api"
DEFAULT_ACCEPT = "application/vnd.skroutz+json;version=3"
DEFAULT_TIMEOUT = 10.0


class HttpCategorySource(BaseSource):
    """Catalog-over-HTTP implementation of :class:`BaseSource`.

    Uses a ``requests.Session`` for the lifetime of the connection and
    asks ``{base_url}/categories/{id}/children`` for each lookup.

    Example::

        source = HttpCategorySource(token="secret")
        with source:
            result = source.fetch_children(76)
            if result.is_found:
                print([c.name for c in result.categories])
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str = "",
        accept: str = DEFAULT_ACCEPT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__()
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._accept = accept
        self._timeout = timeout
        self._session: requests.Session | None = None

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Open the HTTP session."""
        if self._connected:
            return
        self._session = requests.Session()
        self._session.headers.update({"Accept": self._accept})
        self._connected = True

    def disconnect(self) -> None:
        """Close the HTTP session and release pooled connections."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self._connected = False

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def children_url(self, category_id: int) -> str:
        return f"{self._base_url}/categories/{category_id}/children"

    def fetch_children(self, category_id: int) -> FetchResult:
        """Fetch the children of *category_id* from the catalog.

        Returns:
            ``not_found`` on HTTP 404, ``found`` with the parsed
            categories on success, ``transport_error`` otherwise.

        Raises:
            RuntimeError: If called before :meth:`connect`.
        """
        self._assert_connected()
        url = self.children_url(category_id)
        params = {"oauth_token": self._token} if self._token else None

        logger.debug("GET %s", url)
        try:
            with self._session.get(url, params=params, timeout=self._timeout) as response:
                if response.status_code == 404:
                    logger.info("Category %d not found", category_id)
                    return FetchResult.not_found()
                if not response.ok:
                    detail = f"HTTP {response.status_code}: {response.text[:200]}"
                    logger.error("Catalog error for category %d: %s", category_id, detail)
                    return FetchResult.transport_error(detail)
                payload = CategoryList.model_validate(response.json())
        except ValidationError as exc:
            logger.error("Catalog returned an invalid payload for category %d: %s", category_id, exc)
            return FetchResult.transport_error(f"invalid payload: {exc}")
        # requests.JSONDecodeError is also a RequestException, so it goes first
        except requests.JSONDecodeError as exc:
            logger.error("Catalog returned invalid JSON for category %d: %s", category_id, exc)
            return FetchResult.transport_error(f"invalid JSON: {exc}")
        except requests.RequestException as exc:
            logger.error("Catalog request for category %d failed: %s", category_id, exc)
            return FetchResult.transport_error(str(exc))

        logger.debug("Category %d has %d children", category_id, len(payload.categories))
        return FetchResult.found(payload.categories)
