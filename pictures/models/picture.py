from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pictures.db.base import Base
from pictures.models.common import ImageableMixin, TimestampMixin
from pictures.models.file_asset import FileAsset


class Picture(ImageableMixin, TimestampMixin, Base):
    __tablename__ = "pictures"
    __table_args__ = (Index("ix_pictures_imageable", "imageable_type", "imageable_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # No ON DELETE rule: removing a file asset leaves the reference dangling.
    file_asset_id: Mapped[int | None] = mapped_column(ForeignKey("file_assets.id"), nullable=True)

    file_asset: Mapped[FileAsset | None] = relationship(FileAsset, lazy="selectin")

    def __repr__(self) -> str:
        return f"<Picture id={self.id} name={self.name!r} imageable={self.imageable_type}:{self.imageable_id}>"
