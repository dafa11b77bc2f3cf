"""Catalogue queries and admin commands over the product store."""

from protean.exceptions import ObjectNotFoundError

from sokobo.catalogue.product import Product
from sokobo.shared.list_fields import EntityListField, ListFieldEditor
from sokobo.shared.money import format_price
from sokobo.store.entity_store import EntityStore
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)


def _clean_label(value: str) -> str:
    return value.strip() if isinstance(value, str) else value


class ProductService:
    def __init__(self, products: EntityStore[Product]) -> None:
        self.products = products

    # --- Queries ---

    def list_products(self, category: str | None = None, featured: bool = False) -> list[Product]:
        if category:
            return self.by_category(category)
        if featured:
            return self.featured()
        return self.products.get_all()

    def by_category(self, category: str) -> list[Product]:
        return self.products.filter_by(category=category)

    def featured(self) -> list[Product]:
        return self.products.filter_by(featured=True)

    def get(self, product_id: str) -> Product:
        product = self.products.get_by_id(product_id)
        if product is None:
            raise ObjectNotFoundError(f"Product with id {product_id} does not exist")
        return product

    # --- Commands (admin only; the caller runs the gate) ---

    def create(self, **fields) -> Product:
        if fields.get("price") is not None:
            fields["price"] = format_price(fields["price"])

        product = self.products.create(**fields)
        logger.info("product_created", product_id=product.id, name=product.name, category=product.category)
        return product

    def update(self, product_id: str, **changes) -> Product:
        if "price" in changes and changes["price"] is not None:
            changes["price"] = format_price(changes["price"])

        product = self.products.update_by_id(product_id, changes)
        if product is None:
            raise ObjectNotFoundError(f"Product with id {product_id} does not exist")

        logger.info("product_updated", product_id=product_id, fields=sorted(changes))
        return product

    def delete(self, product_id: str) -> None:
        if not self.products.delete_by_id(product_id):
            raise ObjectNotFoundError(f"Product with id {product_id} does not exist")
        logger.info("product_deleted", product_id=product_id)

    # --- Gallery and size-run editing ---

    def _editor(self, product_id: str, field: str) -> ListFieldEditor[str]:
        target = EntityListField(self.products, product_id, field)
        if not target.exists:
            raise ObjectNotFoundError(f"Product with id {product_id} does not exist")
        return ListFieldEditor(target, field, normalize=_clean_label)

    def _edit(self, product_id: str, field: str, operation: str, *args) -> Product:
        with self.products.lock:
            editor = self._editor(product_id, field)
            getattr(editor, operation)(*args)
            product = editor.target.entity

        logger.info("product_list_edited", product_id=product_id, field=field, operation=operation)
        return product

    def add_image(self, product_id: str, image: str) -> Product:
        return self._edit(product_id, "images", "append", image)

    def remove_image(self, product_id: str, index: int) -> Product:
        return self._edit(product_id, "images", "remove_at", index)

    def move_image(self, product_id: str, index: int, new_index: int) -> Product:
        """Reorder the gallery; moving an image to 0 makes it the primary image."""
        return self._edit(product_id, "images", "move", index, new_index)

    def add_size(self, product_id: str, size: str) -> Product:
        return self._edit(product_id, "sizes", "append", size)

    def remove_size(self, product_id: str, index: int) -> Product:
        return self._edit(product_id, "sizes", "remove_at", index)

