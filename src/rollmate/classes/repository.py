from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Class, TimeSlot
from ..geofence.model import Geofence


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[Class]:
        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[Class]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        description: Optional[str] = None,
        teacher_id: Optional[int] = None,
        schedule: Sequence[TimeSlot] = (),
        geofence: Optional[Geofence] = None,
    ) -> Class:
        raise NotImplementedError

    def update(self, class_id: int, changes: dict[str, Any]) -> Class:
        """Overwrite the given fields (None included) and return the new row.

        Raises NotFoundError when the class does not exist.
        """

        raise NotImplementedError

    def delete(self, class_id: int) -> bool:
        raise NotImplementedError
