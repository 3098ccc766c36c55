from dataclasses import dataclass


KEY_MAX_LENGTH = 10
BUCKET_COUNT = 26

# ASCII range 97-122.
_FIRST = ord("a")
_LAST = ord("z")


@dataclass(frozen=True)
class InvalidKey:
    value: str


HashResult = int | InvalidKey


def is_valid_key(v: str) -> bool:
    if not isinstance(v, str):
        return False
    if len(v) == 0 or len(v) > KEY_MAX_LENGTH:
        return False
    for c in v:
        if not _FIRST <= ord(c) <= _LAST:
            return False
    return True


def get_hash(v: str) -> HashResult:
    """Bucket index of `v`, taken from its last character only."""
    if not is_valid_key(v):
        return InvalidKey(v)

    hash = ord(v[-1]) - _FIRST
    assert 0 <= hash < BUCKET_COUNT, hash
    return hash


def bucket_letter(index: int) -> str:
    return chr(_FIRST + index)
