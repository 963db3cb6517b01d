"""
Module: reporting.loading.sources

Purpose:
    Record sources feeding the report pipeline. A source answers three
    per-snapshot fetches; the pipeline never talks to storage directly.

Key Functions:
    - load_record_source(): Load a source from a directory of JSONL files

Key Classes:
    - RecordSource: Protocol every source implements
    - InMemoryRecordSource: Source over already-typed records
    - LoaderError: Exception for loading failures

Dependencies:
    - json (std)
    - pathlib (std)
    - zonescore_toolkit.core.utils.serialization: Raw row parsing

Used By:
    - reporting.controller: Fetch orchestration
    - cli: File-backed reports
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Protocol, Sequence, TypeVar, runtime_checkable

from zonescore_toolkit.core.models import Question, Zone, ZoneMembership
from zonescore_toolkit.core.schemas.validator import ValidationError
from zonescore_toolkit.core.utils.serialization import (
    parse_membership_row,
    parse_question_row,
    parse_zone_row,
)

logger = logging.getLogger(__name__)

QUESTIONS_FILE = "questions.jsonl"
ZONES_FILE = "zones.jsonl"
MEMBERSHIPS_FILE = "zone_memberships.jsonl"

T = TypeVar("T")


class LoaderError(Exception):
    """Error loading records from disk."""
    pass


@runtime_checkable
class RecordSource(Protocol):
    """Per-snapshot access to fetched records."""

    def fetch_questions(self, snapshot_id: int) -> Sequence[Question]: ...

    def fetch_zones(self, snapshot_id: int) -> Sequence[Zone]: ...

    def fetch_zone_memberships(self, snapshot_id: int) -> Sequence[ZoneMembership]: ...


@dataclass(frozen=True)
class InMemoryRecordSource:
    """
    Record source over typed records held in memory.

    Read-only after construction, so safe to share between threads.

    Attributes:
        questions: Question records of every snapshot
        zones: Zone records of every snapshot
        memberships: Zone membership records of every snapshot

    Example:
        >>> source = InMemoryRecordSource(questions=qs, zones=zs, memberships=ms)
        >>> len(source.fetch_zones(1))
        2
    """

    questions: tuple[Question, ...] = ()
    zones: tuple[Zone, ...] = ()
    memberships: tuple[ZoneMembership, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence, store tuples
        object.__setattr__(self, "questions", tuple(self.questions))
        object.__setattr__(self, "zones", tuple(self.zones))
        object.__setattr__(self, "memberships", tuple(self.memberships))

    def fetch_questions(self, snapshot_id: int) -> List[Question]:
        return [q for q in self.questions if q.snapshot_id == snapshot_id]

    def fetch_zones(self, snapshot_id: int) -> List[Zone]:
        return [z for z in self.zones if z.snapshot_id == snapshot_id]

    def fetch_zone_memberships(self, snapshot_id: int) -> List[ZoneMembership]:
        return [m for m in self.memberships if m.snapshot_id == snapshot_id]

    @property
    def snapshot_ids(self) -> List[int]:
        """All snapshot ids that have at least one zone, ascending."""
        return sorted({z.snapshot_id for z in self.zones})


def load_record_source(data_dir: Path, *, strict: bool = False) -> InMemoryRecordSource:
    """
    Load questions, zones and memberships from a directory of JSONL files.

    Expected layout:
        data_dir/questions.jsonl
        data_dir/zones.jsonl
        data_dir/zone_memberships.jsonl   (optional)

    Each line is one raw row. Rows are validated once here; malformed rows
    are logged and skipped.

    Args:
        data_dir: Directory holding the JSONL files
        strict: Whether to validate rows against the JSON Schemas too

    Returns:
        InMemoryRecordSource with every valid record

    Raises:
        LoaderError: If data_dir or a required file is missing

    Example:
        >>> source = load_record_source(Path("data/fixtures"))
        >>> source.snapshot_ids
        [1, 2]
    """
    if not data_dir.is_dir():
        raise LoaderError(f"Data directory does not exist: {data_dir}")

    for required in (QUESTIONS_FILE, ZONES_FILE):
        if not (data_dir / required).exists():
            raise LoaderError(f"Missing {required} in {data_dir}")

    questions = _read_jsonl(data_dir / QUESTIONS_FILE, lambda r: parse_question_row(r, strict=strict))
    zones = _read_jsonl(data_dir / ZONES_FILE, lambda r: parse_zone_row(r, strict=strict))

    memberships_path = data_dir / MEMBERSHIPS_FILE
    if memberships_path.exists():
        memberships = _read_jsonl(memberships_path, lambda r: parse_membership_row(r, strict=strict))
    else:
        logger.warning(f"No {MEMBERSHIPS_FILE} in {data_dir}; zones will have no questions")
        memberships = []

    logger.info(
        f"Loaded {len(questions)} questions, {len(zones)} zones and "
        f"{len(memberships)} memberships from {data_dir}"
    )
    return InMemoryRecordSource(questions=questions, zones=zones, memberships=memberships)


def _read_jsonl(path: Path, parse: Callable[[dict], T]) -> List[T]:
    """Parse every non-blank line of a JSONL file, skipping bad rows."""
    records: List[T] = []
    try:
        with open(path, "rb") as f:
            raw_lines = f.readlines()
    except OSError as e:
        raise LoaderError(f"Failed to read {path}: {e}") from e

    for line_no, raw in enumerate(raw_lines, start=1):
        try:
            line = raw.decode("utf-8")
            if not line.strip():
                continue
            records.append(parse(json.loads(line)))
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Skipping {path.name}:{line_no}: {e}")
    return records
