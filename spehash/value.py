from dataclasses import dataclass, field
import enum

from .key import is_valid_key


class Status(enum.Enum):
    NEVER_USED = enum.auto()
    # Deleted; ready to be reused by an insert of the same value.
    TOMBSTONE = enum.auto()
    OCCUPIED = enum.auto()


@dataclass
class Entry:
    status: Status = Status.NEVER_USED
    value: str = ""

    def set(self, v: str) -> bool:
        if self.status == Status.OCCUPIED:
            return False
        if not is_valid_key(v):
            return False

        self.status = Status.OCCUPIED
        self.value = v
        return True

    def delete(self):
        self.status = Status.TOMBSTONE


def new_entry() -> Entry:
    return Entry()


@dataclass
class Slot:
    """One bucket. The last entry is always the single NEVER_USED sentinel."""

    entries: list[Entry] = field(default_factory=lambda: [new_entry()])

    def find(self, v: str) -> tuple[Entry | None, bool]:
        # Matches by value only; callers check the status.
        for entry in self.entries:
            if entry.value == v:
                return entry, True
        return None, False

    def append(self, v: str) -> bool:
        last = self.entries[-1]
        assert last.status == Status.NEVER_USED, last

        appended = last.set(v)
        self.entries.append(new_entry())
        return appended

    def count(self, status: Status) -> int:
        return sum(1 for entry in self.entries if entry.status == status)


def new_slot() -> Slot:
    return Slot()
