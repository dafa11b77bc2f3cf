"""Editing helpers for ordered list fields (image galleries, size runs).

The admin console edits ``Product.images``, ``Product.sizes`` and
``PortfolioItem.images`` the same way: append an entry, drop one by position,
move one, or replace the whole list. ``ListFieldEditor`` implements those
operations once, against anything that satisfies ``EditableList``.
"""

from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from protean.exceptions import ValidationError

T = TypeVar("T")


class EditableList(Protocol[T]):
    def get_items(self) -> list[T]: ...

    def set_items(self, items: list[T]) -> None: ...


class ListFieldEditor(Generic[T]):
    """Apply positional edits to an ``EditableList``.

    Every operation reads the current list, builds a new one and hands it to
    ``set_items`` in a single call; the list returned by ``get_items`` is
    never mutated in place.
    """

    def __init__(self, target: EditableList[T], field: str, normalize: Callable[[T], T] | None = None) -> None:
        self.target = target
        self.field = field
        self.normalize = normalize

    def _clean(self, item: T) -> T:
        if self.normalize is not None:
            item = self.normalize(item)
        if item is None or (isinstance(item, str) and not item.strip()):
            raise ValidationError({self.field: ["Entry cannot be blank"]})
        return item

    def _check_index(self, items: list[T], index: int) -> None:
        if not 0 <= index < len(items):
            raise ValidationError({self.field: [f"No entry at position {index}"]})

    def append(self, item: T) -> list[T]:
        items = [*self.target.get_items(), self._clean(item)]
        self.target.set_items(items)
        return items

    def remove_at(self, index: int) -> list[T]:
        items = list(self.target.get_items())
        self._check_index(items, index)
        del items[index]
        self.target.set_items(items)
        return items

    def move(self, index: int, new_index: int) -> list[T]:
        items = list(self.target.get_items())
        self._check_index(items, index)
        self._check_index(items, new_index)
        items.insert(new_index, items.pop(index))
        self.target.set_items(items)
        return items

    def replace(self, items: list[T]) -> list[T]:
        items = [self._clean(item) for item in items]
        self.target.set_items(items)
        return items


class EntityListField(Generic[T]):
    """Expose one list field of a stored entity as an ``EditableList``.

    Writes go through ``EntityStore.update_by_id``, so the store lock and the
    aggregate's invariants apply to every edit.
    """

    def __init__(self, store, entity_id: str, field: str) -> None:
        self.store = store
        self.entity_id = entity_id
        self.field = field
        self.entity = store.get_by_id(entity_id)

    @property
    def exists(self) -> bool:
        return self.entity is not None

    def get_items(self) -> list[T]:
        return list(getattr(self.entity, self.field))

    def set_items(self, items: list[T]) -> None:
        self.entity = self.store.update_by_id(self.entity_id, {self.field: items})
