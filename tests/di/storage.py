"""Mock avatar storage provider for testing."""

from dishka import Scope, provide

from scribe.adapter.storage import AvatarStorage, MockAvatarStorage
from scribe.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploaded avatars in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_avatar_storage(self) -> AvatarStorage:
        """Provide mock avatar storage."""
        return MockAvatarStorage()
