from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, Sequence

from ..core.exceptions import NotFoundError
from ..geofence.model import Geofence
from ..storage.memory_store import MemoryStore
from .model import Class, TimeSlot
from .repository import ClassRepository

_UPDATABLE = {"name", "description", "teacher_id", "schedule", "geofence"}


class MemoryClassRepository(ClassRepository):
    TABLE = "classes"

    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Class]:
        return self._store.rows(self.TABLE)

    def get_by_id(self, class_id: int) -> Optional[Class]:
        return self._store.table(self.TABLE).get(int(class_id))

    def create(
        self,
        *,
        name: str,
        description: Optional[str] = None,
        teacher_id: Optional[int] = None,
        schedule: Sequence[TimeSlot] = (),
        geofence: Optional[Geofence] = None,
    ) -> Class:
        class_id = self._store.next_id(self.TABLE)
        cls = Class(
            class_id=class_id,
            name=name,
            description=description,
            teacher_id=teacher_id,
            schedule=tuple(schedule),
            geofence=geofence,
        )
        self._store.table(self.TABLE)[class_id] = cls
        return cls

    def update(self, class_id: int, changes: dict[str, Any]) -> Class:
        existing = self.get_by_id(class_id)
        if not existing:
            raise NotFoundError("Class not found")

        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unknown class fields: {sorted(unknown)}")

        if "schedule" in changes:
            changes = {**changes, "schedule": tuple(changes["schedule"] or ())}

        updated = replace(existing, **changes)
        self._store.table(self.TABLE)[existing.class_id] = updated
        return updated

    def delete(self, class_id: int) -> bool:
        # No cascade: students and attendance rows keep their class_id.
        return self._store.table(self.TABLE).pop(int(class_id), None) is not None
