from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from category_source import CategorySourceError
from tree_builder.build_tree import InvalidArgumentError
from tree_api.dependencies import Source
from tree_api.services import treeService

router = APIRouter(prefix="/tree", tags=["tree"])


# ── Schemas ───────────────────────────────────────────────────────────────────

class TreeResponse(BaseModel):
    category_id: int
    depth: int
    found: bool
    rendered: str


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/{category_id}", response_model=TreeResponse)
def get_tree(
    category_id: int,
    source: Source,
    depth: int = Query(default=2),
    format: Literal["ascii", "json"] = Query(default="ascii"),
) -> TreeResponse:
    """Build the category tree under *category_id* and render it."""
    try:
        result = treeService.render_tree(category_id, depth, format, source)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CategorySourceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return TreeResponse(**result)
