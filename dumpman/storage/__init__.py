from .base import StorageClient
from .local import LocalStorageClient

__all__ = ["StorageClient", "LocalStorageClient"]
