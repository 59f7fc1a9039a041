from abc import ABC, abstractmethod
from typing import Any

from .models import FetchResult


class BaseSource(ABC):
    """Abstract base class for all category sources.

    Subclasses must implement the connection lifecycle and the
    children lookup for their catalog backend.
    """

    def __init__(self) -> None:
        self._connected: bool = False

    @property
    def is_connected(self) -> bool:
        """Return True if the source is ready to serve lookups."""
        return self._connected

    @abstractmethod
    def connect(self) -> None:
        """Acquire whatever the backend needs to answer lookups."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Release the resources acquired by :meth:`connect`."""
        ...

    @abstractmethod
    def fetch_children(self, category_id: int) -> FetchResult:
        """Look up the direct children of a category.

        Args:
            category_id: Id of the parent category.

        Returns:
            A :class:`FetchResult`. Implementations report missing
            categories and transport problems through the result
            instead of raising.
        """
        ...

    def _assert_connected(self) -> None:
        if not self._connected:
            raise RuntimeError(
                f"Not connected. Call connect() before using {type(self).__name__}."
            )

    def __enter__(self) -> "BaseSource":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.disconnect()
