"""Portfolio showcase items."""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, List, String, Text

from sokobo.domain import sokobo


class PortfolioCategory(Enum):
    BRANDING = "branding"
    PRINT = "print"
    DIGITAL = "digital"
    APPAREL = "apparel"


@sokobo.aggregate
class PortfolioItem:
    """A piece of design work shown on the public portfolio page."""

    title: String(required=True, max_length=200, sanitize=False)
    description: Text(required=True, sanitize=False)
    images: List(content_type=str)
    category: String(required=True, max_length=50, choices=PortfolioCategory, sanitize=False)
    created_at: DateTime(default=datetime.now)

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None
