from __future__ import annotations

from datetime import datetime, timezone
from typing import NamedTuple

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ImageableRef(NamedTuple):
    """Kind tag and primary key of the entity that owns a picture."""

    type: str
    id: int


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )


class ImageableMixin:
    """Stores a polymorphic owner as an ``(imageable_type, imageable_id)`` pair.

    Nothing at the database level ties the pair to a table; it is resolved
    through ``pictures.services.imageable``.
    """

    imageable_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    imageable_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    @property
    def imageable_ref(self) -> ImageableRef | None:
        if self.imageable_type is None or self.imageable_id is None:
            return None
        return ImageableRef(self.imageable_type, self.imageable_id)

    def set_imageable_ref(self, ref: ImageableRef) -> None:
        self.imageable_type = ref.type
        self.imageable_id = ref.id
