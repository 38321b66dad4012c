# tests/test_models.py
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from dumpman.models import MapOp, MapOpType, Media


def test_map_op_defaults_to_copy():
    """Ensures ops default to the copy operation."""
    op = MapOp(name="beach", start=1, end=5)
    assert op.op_type is MapOpType.COPY


@pytest.mark.parametrize("start,end", [(5, 5), (6, 5), (-1, 3)])
def test_map_op_rejects_bad_ranges(start, end):
    """Ensures negative or empty ranges are rejected."""
    with pytest.raises(ValidationError):
        MapOp(name="beach", start=start, end=end)


@pytest.mark.parametrize("name", ["", "   ", "a/b", "..", "."])
def test_map_op_rejects_bad_names(name):
    """Ensures names must be plain directory names."""
    with pytest.raises(ValidationError):
        MapOp(name=name, start=0, end=1)


def test_map_op_strips_name():
    """Ensures surrounding whitespace is stripped from names."""
    assert MapOp(name="  beach ", start=0, end=1).name == "beach"


def test_map_op_contains_is_half_open():
    """Ensures the range end is exclusive."""
    op = MapOp(name="beach", start=3, end=5)
    created = datetime(2022, 7, 1, tzinfo=timezone.utc)

    assert op.contains(Media(id=3, filename="MVI_0003.MOV", created_at=created))
    assert op.contains(Media(id=4, filename="MVI_0004.MOV", created_at=created))
    assert not op.contains(Media(id=5, filename="MVI_0005.MOV", created_at=created))


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ((0, 5), (5, 10), False),
        ((0, 5), (4, 10), True),
        ((2, 4), (0, 10), True),
        ((3, 6), (3, 4), True),
        ((8, 9), (0, 3), False),
    ],
)
def test_map_op_overlaps(first, second, expected):
    """Ensures overlap is symmetric and half-open."""
    a = MapOp(name="a", start=first[0], end=first[1])
    b = MapOp(name="b", start=second[0], end=second[1])
    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


@pytest.mark.parametrize("name", ["copy", "Copy", " COPY "])
def test_map_op_type_parse(name):
    """Ensures op types parse case-insensitively."""
    assert MapOpType.parse(name) is MapOpType.COPY


def test_map_op_type_parse_unknown():
    """Ensures an unknown op type lists the available ones."""
    with pytest.raises(ValueError, match="Unknown map operation 'move'"):
        MapOpType.parse("move")


def test_media_sorts_by_id():
    """Ensures media sort by file number."""
    created = datetime(2022, 7, 1, tzinfo=timezone.utc)
    media = [
        Media(id=9, filename="MVI_0009.MOV", created_at=created),
        Media(id=2, filename="MVI_0002.MOV", created_at=created),
    ]
    assert [m.id for m in sorted(media)] == [2, 9]
