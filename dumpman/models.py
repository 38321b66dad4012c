# models.py
from datetime import datetime
from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class MapOpType(str, Enum):
    """Kinds of operation a group can apply to its media."""

    COPY = "copy"

    @classmethod
    def parse(cls, name: str) -> "MapOpType":
        """Looks up an operation by its kebab-case name."""
        try:
            return cls(name.strip().lower().replace("_", "-"))
        except ValueError:
            raise ValueError(
                f"Unknown map operation '{name}'. Available: {', '.join(cls.names())}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


class Media(BaseModel):
    """
    A single media file found in the dump. The id is the file number the
    camera encodes in the file name.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    filename: str
    created_at: datetime

    def __lt__(self, other: "Media") -> bool:
        return self.id < other.id


class MapOp(BaseModel):
    """A named half-open range [start, end) of media ids."""

    model_config = ConfigDict(frozen=True)

    op_type: MapOpType = MapOpType.COPY
    name: str
    start: int
    end: int

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Group name cannot be empty")
        if value in (".", "..") or PurePath(value).name != value:
            raise ValueError(f"Group name '{value}' must be a plain directory name")
        return value

    @model_validator(mode="after")
    def validate_range(self):
        if self.start < 0:
            raise ValueError("Range start cannot be negative")
        if self.end <= self.start:
            raise ValueError(
                f"Range end ({self.end}) must be greater than start ({self.start})"
            )
        return self

    def contains(self, media: Media) -> bool:
        return self.start <= media.id < self.end

    def overlaps(self, other: "MapOp") -> bool:
        return self.start < other.end and other.start < self.end
