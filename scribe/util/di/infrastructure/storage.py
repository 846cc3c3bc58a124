"""Avatar storage infrastructure providers."""

from dishka import Scope, provide

from scribe.adapter.storage import AvatarStorage, S3AvatarStorage
from scribe.config import StorageSettings
from scribe.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using S3."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_avatar_storage(self, settings: StorageSettings) -> AvatarStorage:
        """Provide S3 avatar storage."""
        return S3AvatarStorage(settings)
