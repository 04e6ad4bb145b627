from __future__ import annotations

import logging
import os
import struct
import tempfile
from pathlib import Path

from ..common.datetime_utils import days_in_month
from ..core.constants import MAX_DAYS
from ..core.enums import Remark
from ..core.exceptions import PersistenceUnavailableError
from .model import RosterSnapshot, StudentRecord

logger = logging.getLogger(__name__)

MAGIC = b"SAMS"
FORMAT_VERSION = 1

# magic, version, record_count, current_month, days_in_month
HEADER_FMT = "<4sHiii"
HEADER_SIZE = struct.calcsize(HEADER_FMT)
ROLL_FMT = "<i"
LENGTH_FMT = "<I"
MASK_FMT = "<I"


def _pack_text(value: str) -> bytes:
    data = value.encode("utf-8")
    return struct.pack(LENGTH_FMT, len(data)) + data


def _pack_mask(attendance: list[bool]) -> bytes:
    mask = 0
    for index, present in enumerate(attendance[:MAX_DAYS]):
        if present:
            mask |= 1 << index
    return struct.pack(MASK_FMT, mask)


def encode_snapshot(snapshot: RosterSnapshot) -> bytes:
    try:
        parts = [
            struct.pack(
                HEADER_FMT,
                MAGIC,
                FORMAT_VERSION,
                len(snapshot.records),
                snapshot.current_month,
                snapshot.days_in_month,
            )
        ]
        for r in snapshot.records:
            parts.append(struct.pack(ROLL_FMT, r.roll_number))
            parts.append(_pack_text(r.name))
            parts.append(_pack_mask(r.attendance))
            parts.append(_pack_text(r.remark.value))
    except struct.error as e:
        raise PersistenceUnavailableError(f"Roster does not fit the data file format: {e}") from e
    return b"".join(parts)


class _Reader:
    def __init__(self, data: bytes):
        self._data = data
        self._offset = 0

    def unpack(self, fmt: str) -> tuple:
        size = struct.calcsize(fmt)
        if self._offset + size > len(self._data):
            raise PersistenceUnavailableError("Data file is truncated")
        values = struct.unpack_from(fmt, self._data, self._offset)
        self._offset += size
        return values

    def text(self) -> str:
        (length,) = self.unpack(LENGTH_FMT)
        if self._offset + length > len(self._data):
            raise PersistenceUnavailableError("Data file is truncated")
        raw = self._data[self._offset : self._offset + length]
        self._offset += length
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PersistenceUnavailableError(f"Data file holds invalid text: {e}") from e

    @property
    def exhausted(self) -> bool:
        return self._offset == len(self._data)


def decode_snapshot(data: bytes) -> RosterSnapshot:
    reader = _Reader(data)
    magic, version, count, month, days = reader.unpack(HEADER_FMT)
    if magic != MAGIC:
        raise PersistenceUnavailableError("Not a roster data file")
    if version != FORMAT_VERSION:
        raise PersistenceUnavailableError(f"Unsupported data file version {version}")
    if count < 0:
        raise PersistenceUnavailableError(f"Invalid record count {count}")
    if not 1 <= month <= 12 or days != days_in_month(month):
        raise PersistenceUnavailableError(f"Invalid month settings {month}/{days}")

    records: list[StudentRecord] = []
    for _ in range(count):
        (roll_number,) = reader.unpack(ROLL_FMT)
        name = reader.text()
        (mask,) = reader.unpack(MASK_FMT)
        remark_value = reader.text()
        try:
            remark = Remark(remark_value)
        except ValueError as e:
            raise PersistenceUnavailableError(f"Invalid remark {remark_value!r}") from e
        records.append(
            StudentRecord(
                roll_number=roll_number,
                name=name,
                attendance=[bool(mask >> i & 1) for i in range(MAX_DAYS)],
                remark=remark,
            )
        )

    if not reader.exhausted:
        raise PersistenceUnavailableError("Data file has trailing bytes")
    return RosterSnapshot(records=records, current_month=month, days_in_month=days)


class BinaryFileRosterRepository:
    """Roster persisted to one versioned binary file.

    Note: Saves go through a temp file + os.replace so a failed write never
    leaves a half-written data file behind.
    """

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> RosterSnapshot:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError as e:
            raise PersistenceUnavailableError(f"No saved data found at {self._path}") from e
        except OSError as e:
            raise PersistenceUnavailableError(f"Cannot read {self._path}: {e}") from e

        snapshot = decode_snapshot(data)
        logger.info("Loaded %d students from %s", len(snapshot.records), self._path)
        return snapshot

    def save(self, snapshot: RosterSnapshot) -> None:
        data = encode_snapshot(snapshot)
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=self._path.parent)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise PersistenceUnavailableError(f"Cannot write {self._path}: {e}") from e
        logger.info("Saved %d students to %s", len(snapshot.records), self._path)
