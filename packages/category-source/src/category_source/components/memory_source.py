import logging
from typing import Any, Iterable, Mapping

from .base_source import BaseSource
from .models import Category, FetchResult

logger = logging.getLogger(__name__)


class InMemorySource(BaseSource):
    """Serves children from a fixed mapping instead of a remote catalog.

    Ids missing from *children* are reported as ``not_found``; ids in
    *failing_ids* are reported as ``transport_error``. Every lookup is
    recorded in :attr:`calls`.

    Example::

        source = InMemorySource({
            76: [{"id": 1, "name": "Phones"}, {"id": 2, "name": "Tablets"}],
            1: [],
        })
        with source:
            source.fetch_children(76)
        source.calls  # [76]
    """

    def __init__(
        self,
        children: Mapping[int, Iterable[Category | Mapping[str, Any]]],
        failing_ids: Iterable[int] = (),
    ) -> None:
        super().__init__()
        self._children: dict[int, list[Category]] = {
            category_id: [Category.model_validate(c) for c in entries]
            for category_id, entries in children.items()
        }
        self._failing_ids = set(failing_ids)
        self.calls: list[int] = []

    def connect(self) -> None:
        self._connected = True

    def disconnect(self) -> None:
        self._connected = False

    def fetch_children(self, category_id: int) -> FetchResult:
        self._assert_connected()
        self.calls.append(category_id)
        if category_id in self._failing_ids:
            logger.error("Simulated catalog failure for category %d", category_id)
            return FetchResult.transport_error(f"simulated failure for {category_id}")
        if category_id not in self._children:
            return FetchResult.not_found()
        return FetchResult.found(list(self._children[category_id]))
