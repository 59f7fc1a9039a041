from . import health as healthService
from . import tree as treeService

__all__ = ["healthService", "treeService"]
