# mapper.py
import logging
from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .config import get_settings
from .exceptions import (
    DuplicateGroupError,
    InvalidRootError,
    NoOperationsError,
    NoVideosError,
    OutputDirectoryNotEmptyError,
    OutputDirectoryNotFoundError,
    OverlappingRangeError,
)
from .models import MapOp, MapOpType, Media
from .storage import LocalStorageClient, StorageClient

Prompt = Callable[[str], str]


def validate_ops(ops: List[MapOp]):
    """
    Checks that a set of map operations can be executed together.
    Raises an OpValidationError subclass on the first problem found.
    """
    if not ops:
        raise NoOperationsError()

    seen = set()
    for op in ops:
        if op.name in seen:
            raise DuplicateGroupError(op.name)
        seen.add(op.name)

    for i, first in enumerate(ops):
        for second in ops[i + 1:]:
            if first.overlaps(second):
                raise OverlappingRangeError(first, second)


class Mapper:
    """
    Maps the media of a camera dump into named groups under an output directory.
    """

    def __init__(
        self,
        root_path: Path,
        out_path: Path,
        storage: StorageClient,
        prompt: Optional[Prompt] = None,
    ):
        self.root_path = root_path
        self.out_path = out_path
        self.storage = storage
        self.prompt = prompt or input
        self.media: List[Media] = []
        self.ops: List[MapOp] = []

    @classmethod
    def try_new(
        cls,
        root: str,
        out: str,
        mkdir: bool = False,
        storage: Optional[StorageClient] = None,
        prompt: Optional[Prompt] = None,
    ) -> "Mapper":
        """
        Validates the root and output directories and returns a ready Mapper.
        The output directory is created when missing and mkdir is set.
        """
        settings = get_settings()
        storage = storage or LocalStorageClient()

        root_path = Path(root).joinpath(*settings.content_parts)
        if not storage.verify_folder_exists(root_path):
            raise InvalidRootError(root, root_path)
        logging.debug(f"Root is valid: {root_path}")

        out_path = Path(out)
        if not storage.verify_folder_exists(out_path):
            if not mkdir:
                raise OutputDirectoryNotFoundError()
            storage.create_folder(out_path, parents=True)
        elif not storage.is_empty(out_path, ignored=settings.IGNORED_OUTPUT_ENTRIES):
            raise OutputDirectoryNotEmptyError()
        logging.debug(f"Output is valid: {out_path}")

        return cls(root_path, out_path, storage, prompt=prompt)

    def load_media(self):
        """Parses media ids from file names in the content directory."""
        regex = get_settings().media_regex
        media = []
        for filename in self.storage.list_files(self.root_path):
            match = regex.fullmatch(filename)
            if match is None:
                logging.debug(f"Skipping non-media file: {filename}")
                continue
            media.append(
                Media(
                    id=int(match.group(1)),
                    filename=filename,
                    created_at=self.storage.created_at(self.root_path / filename),
                )
            )

        if not media:
            raise NoVideosError()

        media.sort()
        self.media.extend(media)
        logging.info(f"Parsed {len(media)} video files")

    def get_range(self) -> Tuple[int, int]:
        if not self.media:
            return (0, 0)
        return (self.media[0].id, self.media[-1].id)

    def __len__(self) -> int:
        return len(self.media)

    def validate_ops(self):
        validate_ops(self.ops)

    def _prompt_op_type(self) -> MapOpType:
        if len(MapOpType) > 1:
            return MapOpType.parse(self.prompt("Enter map operation: "))
        return MapOpType.COPY

    def _prompt_int(self, message: str) -> int:
        while True:
            reply = self.prompt(message).strip()
            try:
                return int(reply)
            except ValueError:
                print(f"'{reply}' is not a number, try again.")

    def prompt_for_ops(self):
        """Asks the user for groups until an empty name is entered."""
        ops = []
        while True:
            name = self.prompt("Enter group name (empty = done): ").strip()
            if not name:
                break

            try:
                op_type = self._prompt_op_type()
                start = self._prompt_int("Enter start range (incl.): ")
                end = self._prompt_int("Enter end range (excl.): ")
                ops.append(MapOp(op_type=op_type, name=name, start=start, end=end))
            except (ValueError, ValidationError) as e:
                logging.warning(f"Invalid group '{name}': {e}")
                print(f"Invalid group, please enter it again. ({_short_error(e)})")

        self.ops.extend(ops)
        self.validate_ops()

    def _day_bounds(self) -> Dict[date, Tuple[int, int]]:
        bounds: Dict[date, Tuple[int, int]] = {}
        for media in self.media:
            day = media.created_at.date()
            if day not in bounds:
                bounds[day] = (media.id, media.id + 1)
                continue
            start, end = bounds[day]
            bounds[day] = (min(start, media.id), max(end, media.id + 1))
        return bounds

    def _prompt_day_op(self, day: date, start: int, end: int) -> MapOp:
        while True:
            reply = self.prompt(f"{day.isoformat()}: ").strip()
            name = f"{reply}_{day.isoformat()}" if reply else day.isoformat()
            try:
                op_type = self._prompt_op_type()
                return MapOp(op_type=op_type, name=name, start=start, end=end)
            except (ValueError, ValidationError) as e:
                logging.warning(f"Invalid group '{name}': {e}")
                print(f"Invalid name, please enter it again. ({_short_error(e)})")

    def group_by_day(self):
        """Proposes one group per calendar day and asks the user to name each."""
        bounds = self._day_bounds()
        logging.debug(f"Day bounds: {bounds}")

        print("Enter a name for the following days.")
        ops = []
        for day in sorted(bounds):
            ops.append(self._prompt_day_op(day, *bounds[day]))

        self.ops.extend(ops)
        self.validate_ops()

    def execute(self) -> Dict[str, int]:
        """
        Runs every map operation and returns the number of files
        written per group.
        """
        summary = {}
        for op in self.ops:
            logging.debug(f"Processing op: {op.name}")
            if op.op_type is MapOpType.COPY:
                summary[op.name] = self._copy(op)
        return summary

    def _copy(self, op: MapOp) -> int:
        group_out = self.out_path / op.name
        self.storage.create_folder(group_out)
        copied = 0
        for media in self.media:
            if op.contains(media):
                self.storage.copy_file(
                    self.root_path / media.filename, group_out / media.filename
                )
                copied += 1
        logging.info(f"Copied {copied} files into {group_out}")
        return copied


def _short_error(e: Exception) -> str:
    if isinstance(e, ValidationError):
        return "; ".join(err["msg"] for err in e.errors())
    return str(e)
