from dataclasses import dataclass, field

from .debug import dump_slots, trace_operation
from .key import BUCKET_COUNT, InvalidKey, bucket_letter, get_hash
from .shared import debug_trace, printf_err
from .value import Entry, Slot, Status, new_slot


@dataclass
class Hashtable:
    slots: list[Slot] = field(
        default_factory=lambda: [new_slot() for _ in range(BUCKET_COUNT)]
    )

    def get_slot(self, v: str) -> Slot | InvalidKey:
        hash = get_hash(v)
        if isinstance(hash, InvalidKey):
            return hash
        return self.slots[hash]

    def search(self, v: str) -> tuple[Entry | None, bool]:
        """
        Find the entry holding `v`.

        A tombstoned entry that still holds `v` is reported as found; check
        `entry.status` to tell a live key from a deleted one.
        """
        slot = self.get_slot(v)
        if isinstance(slot, InvalidKey):
            self._trace("search", v, False)
            return None, False

        entry, found = slot.find(v)
        self._trace("search", v, found)
        return entry, found

    def insert(self, v: str) -> bool:
        slot = self.get_slot(v)
        if isinstance(slot, InvalidKey):
            self._trace("insert", v, False)
            return False

        entry, found = slot.find(v)
        if found:
            assert entry is not None
            # Revives a tombstone in place; refused if still occupied.
            inserted = entry.set(v)
        else:
            inserted = slot.append(v)

        self._trace("insert", v, inserted)
        return inserted

    def delete(self, v: str) -> bool:
        slot = self.get_slot(v)
        if isinstance(slot, InvalidKey):
            self._trace("delete", v, False)
            return False

        entry, found = slot.find(v)
        if not found:
            self._trace("delete", v, False)
            return False

        assert entry is not None
        entry.delete()
        self._trace("delete", v, True)
        return True

    def dump(self) -> str:
        """
        Bucket stats as `<letter><occupied><tombstone><never used>`, space
        separated, skipping buckets holding neither occupied nor tombstoned
        entries. e.g. "a101 b011"
        """
        d = []
        for i, slot in enumerate(self.slots):
            occ = slot.count(Status.OCCUPIED)
            tom = slot.count(Status.TOMBSTONE)
            nev = slot.count(Status.NEVER_USED)

            if nev > 1:
                printf_err("more than one never used entry found in slot: {0}\n", slot)
                raise Exception("More than one never used entry", bucket_letter(i))

            if occ > 0 or tom > 0:
                d.append(f"{bucket_letter(i)}{occ}{tom}{nev}")
        return " ".join(d)

    def _trace(self, name: str, v: str, result: bool):
        if debug_trace():
            trace_operation(name, v, get_hash(v), result)


def new_table() -> Hashtable:
    return Hashtable()


def search(table: Hashtable, key: str) -> tuple[str, bool]:
    entry, found = table.search(key)
    if not found:
        return "", False
    assert entry is not None
    return entry.value, True


def insert(table: Hashtable, key: str) -> bool:
    return table.insert(key)


def delete(table: Hashtable, key: str) -> bool:
    return table.delete(key)


def dump(table: Hashtable) -> str:
    return table.dump()


def dump_table(table: Hashtable, name: str = "table"):
    dump_slots(table.slots, name)
