from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pictures.models.file_asset import FileAsset
from pictures.models.picture import Picture
from pictures.services.imageable import imageable_ref

logger = logging.getLogger(__name__)

DEFAULT_FILE_PERMISSION = "public"


class FileAssetAlreadyAttached(RuntimeError):
    """Raised when a picture already owns its file asset."""


async def attach_file_asset(db: AsyncSession, picture: Picture) -> FileAsset:
    """Create the picture's companion file asset and link it.

    The picture must already be flushed. Only the session is touched; the
    caller owns the transaction.
    """
    if picture.id is None:
        raise ValueError("picture must be flushed before its file asset is attached")
    if picture.file_asset_id is not None:
        raise FileAssetAlreadyAttached(f"picture id={picture.id} already has file asset id={picture.file_asset_id}")

    asset = FileAsset(permission=DEFAULT_FILE_PERMISSION, filename=picture.name)
    db.add(asset)
    await db.flush()

    picture.file_asset = asset
    await db.flush()
    return asset


async def create_picture(db: AsyncSession, *, name: str | None, imageable: Any) -> Picture:
    """Insert a picture for ``imageable`` together with its file asset.

    ``imageable`` is either a registered ORM entity or an ``ImageableRef``.
    Both rows are committed in one transaction; on any failure the session is
    rolled back and the error propagates.
    """
    ref = imageable_ref(imageable)
    picture = Picture(name=name)
    picture.set_imageable_ref(ref)

    try:
        db.add(picture)
        await db.flush()
        asset = await attach_file_asset(db, picture)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Picture creation failed for imageable=%s:%s name=%r", ref.type, ref.id, name)
        raise

    logger.info(
        "Created picture id=%s for %s:%s with file asset id=%s",
        picture.id,
        ref.type,
        ref.id,
        asset.id,
    )
    return picture


async def rename_picture(db: AsyncSession, picture: Picture, name: str | None) -> Picture:
    # The file asset keeps the filename it was created with.
    picture_id = picture.id
    try:
        picture.name = name
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Picture rename failed for id=%s", picture_id)
        raise
    return picture


async def get_picture(db: AsyncSession, picture_id: int) -> Picture | None:
    return (
        await db.execute(
            select(Picture)
            .options(selectinload(Picture.file_asset))
            .where(Picture.id == picture_id)
            .execution_options(populate_existing=True)
        )
    ).scalar_one_or_none()


async def list_pictures_for(db: AsyncSession, imageable_type: str, imageable_id: int) -> list[Picture]:
    rows = (
        await db.execute(
            select(Picture)
            .options(selectinload(Picture.file_asset))
            .where(Picture.imageable_type == imageable_type, Picture.imageable_id == imageable_id)
            .order_by(Picture.id.asc())
        )
    ).scalars()
    return list(rows)


async def delete_picture(db: AsyncSession, picture: Picture) -> None:
    """Delete the picture row only; its file asset stays in place."""
    picture_id, asset_id = picture.id, picture.file_asset_id
    try:
        await db.delete(picture)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Picture deletion failed for id=%s", picture_id)
        raise
    logger.info("Deleted picture id=%s, file asset id=%s kept", picture_id, asset_id)


async def delete_file_asset(db: AsyncSession, file_asset: FileAsset) -> None:
    """Delete the file asset row only.

    Pictures pointing at it keep their ``file_asset_id``. On backends that
    enforce foreign keys the delete fails with ``IntegrityError``.
    """
    # Rollback expires the instance; ids are read up front.
    asset_id = file_asset.id
    try:
        await db.delete(file_asset)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("File asset deletion failed for id=%s", asset_id)
        raise
    logger.info("Deleted file asset id=%s", asset_id)
