"""Request models for the news proxy."""

from pydantic import BaseModel, Field

# Categories accepted by the provider's top-headlines endpoint
NEWS_CATEGORIES = (
    "business",
    "entertainment",
    "general",
    "health",
    "science",
    "sports",
    "technology",
)

MAX_PAGE_SIZE = 100


class Pagination(BaseModel):
    """Paging parameters shared by every news route."""

    page: int = Field(1, ge=1, description="1-based page number")
    page_size: int = Field(10, ge=1, le=MAX_PAGE_SIZE, description="Articles per page")

    def as_params(self) -> dict:
        """Provider query parameters for this page."""
        return {"page": str(self.page), "pageSize": str(self.page_size)}
