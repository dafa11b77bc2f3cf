"""Keyed, in-process collections of aggregates.

``EntityStore`` wraps the protean repository of one aggregate class and gives
it the storefront's CRUD contract: lookups return ``None`` rather than
raising, partial updates merge into the stored record, and list fields are
replaced wholesale. Each store serializes its own operations with an
``RLock``; no operation touches more than one collection.
"""

import threading
from typing import Any, Generic, TypeVar

from protean import atomic_change
from protean.domain import Domain
from protean.utils.reflection import declared_fields

from sokobo.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Server-assigned on create; never overwritten afterwards
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class EntityStore(Generic[T]):
    def __init__(self, domain: Domain, aggregate_cls: type[T]) -> None:
        self.domain = domain
        self.aggregate_cls = aggregate_cls
        self.lock = threading.RLock()

    def __repr__(self) -> str:
        return f"<EntityStore: {self.aggregate_cls.__name__}>"

    @property
    def name(self) -> str:
        return self.aggregate_cls.__name__

    @property
    def repository(self):
        return self.domain.repository_for(self.aggregate_cls)

    def _writable(self, data: dict[str, Any]) -> dict[str, Any]:
        known = declared_fields(self.aggregate_cls)
        return {key: value for key, value in data.items() if key in known and key not in IMMUTABLE_FIELDS}

    def create(self, **fields: Any) -> T:
        """Insert a new entity and return it.

        ``None`` values count as omitted, so declared defaults apply.
        """
        values = {key: value for key, value in self._writable(fields).items() if value is not None}
        with self.lock:
            entity = self.aggregate_cls(**values)
            self.repository.add(entity)

        logger.debug("entity_created", collection=self.name, entity_id=entity.id)
        return entity

    def get_by_id(self, identifier: str) -> T | None:
        if not identifier:
            return None
        with self.lock:
            return self.repository.get_or_none(identifier)

    def get_all(self) -> list[T]:
        """All entities, in insertion order."""
        with self.lock:
            return self.repository.query.limit(None).all().items

    def filter_by(self, **criteria: Any) -> list[T]:
        """Entities whose fields equal ``criteria``, in insertion order."""
        with self.lock:
            return self.repository.query.filter(**criteria).limit(None).all().items

    def count(self) -> int:
        with self.lock:
            return self.repository.query.limit(None).all().total

    def update_by_id(self, identifier: str, changes: dict[str, Any]) -> T | None:
        """Merge ``changes`` into the stored entity.

        Fields absent from ``changes`` keep their values. List fields present
        in ``changes`` replace the stored list. ``id``, ``created_at`` and
        unknown keys are ignored. All assignments are validated together, and
        nothing is saved if any of them fails.
        """
        changes = self._writable(changes)

        with self.lock:
            repo = self.repository
            entity = repo.get_or_none(identifier) if identifier else None
            if entity is None:
                return None

            with atomic_change(entity):
                for field_name, value in changes.items():
                    setattr(entity, field_name, value)

            repo.add(entity)

        logger.debug(
            "entity_updated",
            collection=self.name,
            entity_id=identifier,
            fields=sorted(changes),
        )
        return entity

    def delete_by_id(self, identifier: str) -> bool:
        with self.lock:
            repo = self.repository
            entity = repo.get_or_none(identifier) if identifier else None
            if entity is None:
                return False
            repo.query.filter(id=identifier).delete()

        logger.debug("entity_deleted", collection=self.name, entity_id=identifier)
        return True
