from .key import HashResult, InvalidKey, bucket_letter
from .shared import printf, printf_err
from .value import Entry, Slot, Status


def dump_slots(slots: list[Slot], name: str):
    printf("== {0:s} ==\n", name)

    for index, slot in enumerate(slots):
        # Only the sentinel: nothing was ever stored here.
        if len(slot.entries) == 1:
            continue
        dump_slot(index, slot)


def dump_slot(index: int, slot: Slot):
    printf("{0:s} {1:3d} |", bucket_letter(index), len(slot.entries))
    for entry in slot.entries:
        printf(" ")
        print_entry(entry)
    printf("\n")


def print_entry(entry: Entry):
    match entry.status:
        case Status.OCCUPIED:
            printf("{0:s}", entry.value)
        case Status.TOMBSTONE:
            printf("~{0:s}", entry.value)
        case Status.NEVER_USED:
            printf(".")


def trace_operation(name: str, key: str, hash: HashResult, result: bool):
    if isinstance(hash, InvalidKey):
        printf_err("{0:<8s} {1!r}: invalid key\n", name, hash.value)
        return
    printf("{0:<8s} {1:<10s} [{2:s}] -> {3}\n", name, key, bucket_letter(hash), result)
