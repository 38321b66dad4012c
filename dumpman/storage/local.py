# storage/local.py
import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

from ..exceptions import StorageError
from .base import StorageClient


class LocalStorageClient(StorageClient):
    """
    Client for the local filesystem, implementing the StorageClient interface.
    Every OSError is re-raised as a StorageError.
    """

    def verify_folder_exists(self, folder_path: Path) -> bool:
        return Path(folder_path).is_dir()

    def is_empty(self, folder_path: Path, ignored: Iterable[str] = ()) -> bool:
        ignored = {name.lower() for name in ignored}
        try:
            for entry in Path(folder_path).iterdir():
                if entry.name.lower() in ignored:
                    logging.debug(f"Ignoring '{entry.name}' in {folder_path}")
                    continue
                return False
        except OSError as e:
            raise StorageError(f"Could not read directory '{folder_path}': {e}") from e
        return True

    def create_folder(self, folder_path: Path, parents: bool = False):
        try:
            logging.info(f"Creating directory {folder_path}")
            Path(folder_path).mkdir(parents=parents, exist_ok=False)
        except OSError as e:
            raise StorageError(f"Could not create directory '{folder_path}': {e}") from e

    def list_files(self, folder_path: Path) -> List[str]:
        try:
            logging.info(f"Listing files in {folder_path}")
            return [entry.name for entry in Path(folder_path).iterdir() if entry.is_file()]
        except OSError as e:
            raise StorageError(f"Could not list directory '{folder_path}': {e}") from e

    def created_at(self, file_path: Path) -> datetime:
        try:
            stat = Path(file_path).stat()
        except OSError as e:
            raise StorageError(f"Could not stat '{file_path}': {e}") from e
        # st_birthtime is missing on most Linux filesystems
        timestamp = getattr(stat, "st_birthtime", None) or stat.st_mtime
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    def copy_file(self, source_path: Path, dest_path: Path):
        try:
            logging.debug(f"Copying {source_path} -> {dest_path}")
            shutil.copy2(source_path, dest_path)
        except OSError as e:
            raise StorageError(
                f"Failed to copy '{source_path}' to '{dest_path}': {e}"
            ) from e
