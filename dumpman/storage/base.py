# storage/base.py
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable, List


class StorageClient(ABC):
    """
    Abstract base class for the filesystem operations dumpman performs.
    The mapper only talks to this interface, so tests can swap in a mock.
    """

    @abstractmethod
    def verify_folder_exists(self, folder_path: Path) -> bool:
        """
        Checks whether a folder exists at the given path.

        :param folder_path: The folder to check.
        :return: True if the path exists and is a directory.
        """
        pass

    @abstractmethod
    def is_empty(self, folder_path: Path, ignored: Iterable[str] = ()) -> bool:
        """
        Checks whether a folder has no entries.

        :param folder_path: The folder to inspect.
        :param ignored: Entry names to disregard (compared case-insensitively).
        """
        pass

    @abstractmethod
    def create_folder(self, folder_path: Path, parents: bool = False):
        """
        Creates a folder. Fails if it already exists.

        :param folder_path: The folder to create.
        :param parents: Also create missing parent folders.
        """
        pass

    @abstractmethod
    def list_files(self, folder_path: Path) -> List[str]:
        """
        Lists the names of regular files directly inside a folder.

        :param folder_path: The folder to list.
        :return: File names, directories excluded.
        """
        pass

    @abstractmethod
    def created_at(self, file_path: Path) -> datetime:
        """
        Returns the creation time of a file as an aware UTC datetime.

        :param file_path: The file to inspect.
        """
        pass

    @abstractmethod
    def copy_file(self, source_path: Path, dest_path: Path):
        """
        Copies a file, preserving its metadata.

        :param source_path: The file to copy.
        :param dest_path: The full destination path, including the filename.
        """
        pass
