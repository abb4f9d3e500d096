from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect

from pictures.models.common import ImageableMixin, ImageableRef

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=type)

_REGISTRY: dict[str, type] = {}


class UnknownImageableType(LookupError):
    """Raised for an imageable kind that was never registered."""


def register_imageable(model: ModelT | None = None, *, type_name: str | None = None) -> Any:
    """Register an ORM model as a kind that may own pictures.

    Works as ``register_imageable(Model)``, ``@register_imageable`` or
    ``@register_imageable(type_name="...")``. The tag stored in
    ``pictures.imageable_type`` defaults to the class name.
    """

    def _register(cls: ModelT) -> ModelT:
        tag = str(type_name or cls.__name__).strip()
        if not tag:
            raise ValueError("imageable type name must not be empty")
        existing = _REGISTRY.get(tag)
        if existing is not None and existing is not cls:
            raise ValueError(f"imageable type {tag!r} already registered for {existing.__name__}")
        _REGISTRY[tag] = cls
        logger.debug("Registered imageable type %s -> %s", tag, cls.__name__)
        return cls

    if model is None:
        return _register
    return _register(model)


def unregister_imageable(type_name: str) -> None:
    _REGISTRY.pop(type_name, None)


def registered_imageable_types() -> dict[str, type]:
    return dict(_REGISTRY)


def imageable_type_for(model: type) -> str:
    """Tag of the nearest registered class in ``model``'s MRO.

    Subclasses of a registered model store the base class tag unless they
    were registered themselves.
    """
    tags = {cls: tag for tag, cls in _REGISTRY.items()}
    for cls in model.__mro__:
        if cls in tags:
            return tags[cls]
    raise UnknownImageableType(f"{model.__name__} is not a registered imageable type")


def imageable_ref(entity: Any) -> ImageableRef:
    """Return the ``(type, id)`` pair a picture stores for ``entity``."""
    if isinstance(entity, ImageableRef):
        return entity
    tag = imageable_type_for(type(entity))
    identity = inspect(entity).identity
    if not identity or identity[0] is None:
        raise ValueError(f"{tag} must be persisted before it can own a picture")
    return ImageableRef(tag, int(identity[0]))


async def resolve_imageable(db: AsyncSession, imageable_type: str, imageable_id: int) -> Any | None:
    model = _REGISTRY.get(imageable_type)
    if model is None:
        raise UnknownImageableType(f"{imageable_type!r} is not a registered imageable type")
    return await db.get(model, imageable_id)


async def load_imageable(db: AsyncSession, picture: ImageableMixin) -> Any | None:
    ref = picture.imageable_ref
    if ref is None:
        return None
    return await resolve_imageable(db, ref.type, ref.id)
