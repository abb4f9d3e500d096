from pictures.models.common import ImageableRef
from pictures.models.file_asset import FileAsset
from pictures.models.picture import Picture

__all__ = [
    "FileAsset",
    "ImageableRef",
    "Picture",
]
