from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class FetchStatus(StrEnum):
    FOUND           = "found"
    NOT_FOUND       = "not_found"
    TRANSPORT_ERROR = "transport_error"


class Category(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str


class CategoryList(BaseModel):
    model_config = ConfigDict(extra="ignore")

    categories: list[Category] = Field(default_factory=list)


class FetchResult(BaseModel):
    """Outcome of a single ``fetch_children`` call.

    Exactly one of three shapes:

    * ``found``            ``categories`` holds the children, in catalog order
    * ``not_found``        the requested category does not exist
    * ``transport_error``  anything else went wrong; ``detail`` says what
    """

    status: FetchStatus
    categories: list[Category] = Field(default_factory=list)
    detail: str | None = None

    @classmethod
    def found(cls, categories: list[Category]) -> "FetchResult":
        return cls(status=FetchStatus.FOUND, categories=categories)

    @classmethod
    def not_found(cls) -> "FetchResult":
        return cls(status=FetchStatus.NOT_FOUND)

    @classmethod
    def transport_error(cls, detail: str) -> "FetchResult":
        return cls(status=FetchStatus.TRANSPORT_ERROR, detail=detail)

    @property
    def is_found(self) -> bool:
        return self.status == FetchStatus.FOUND

    @property
    def is_not_found(self) -> bool:
        return self.status == FetchStatus.NOT_FOUND


class CategorySourceError(RuntimeError):
    """Raised when the catalog could not be reached or answered garbage."""

    def __init__(self, category_id: int, detail: str | None) -> None:
        self.category_id = category_id
        self.detail = detail
        super().__init__(f"Fetching children of category {category_id} failed: {detail}")
