"""Portfolio showcase CRUD. Reads are public; writes are admin-only."""

from protean.exceptions import ObjectNotFoundError

from sokobo.portfolio.portfolio import PortfolioItem
from sokobo.shared.list_fields import EntityListField, ListFieldEditor
from sokobo.store.entity_store import EntityStore
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)


class PortfolioService:
    def __init__(self, portfolio: EntityStore[PortfolioItem]) -> None:
        self.portfolio = portfolio

    def list_items(self) -> list[PortfolioItem]:
        return self.portfolio.get_all()

    def get(self, item_id: str) -> PortfolioItem:
        item = self.portfolio.get_by_id(item_id)
        if item is None:
            raise ObjectNotFoundError(f"Portfolio item with id {item_id} does not exist")
        return item

    def create(self, **fields) -> PortfolioItem:
        item = self.portfolio.create(**fields)
        logger.info("portfolio_item_created", item_id=item.id, title=item.title)
        return item

    def update(self, item_id: str, **changes) -> PortfolioItem:
        item = self.portfolio.update_by_id(item_id, changes)
        if item is None:
            raise ObjectNotFoundError(f"Portfolio item with id {item_id} does not exist")
        logger.info("portfolio_item_updated", item_id=item_id, fields=sorted(changes))
        return item

    def delete(self, item_id: str) -> None:
        if not self.portfolio.delete_by_id(item_id):
            raise ObjectNotFoundError(f"Portfolio item with id {item_id} does not exist")
        logger.info("portfolio_item_deleted", item_id=item_id)

    def _edit_images(self, item_id: str, operation: str, *args) -> PortfolioItem:
        with self.portfolio.lock:
            target = EntityListField(self.portfolio, item_id, "images")
            if not target.exists:
                raise ObjectNotFoundError(f"Portfolio item with id {item_id} does not exist")
            getattr(ListFieldEditor(target, "images"), operation)(*args)
            return target.entity

    def add_image(self, item_id: str, image: str) -> PortfolioItem:
        return self._edit_images(item_id, "append", image)

    def remove_image(self, item_id: str, index: int) -> PortfolioItem:
        return self._edit_images(item_id, "remove_at", index)
