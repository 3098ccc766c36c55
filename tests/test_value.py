from spehash.value import Entry, Status, new_entry, new_slot


def test_entry():
    e = new_entry()
    assert e == Entry(Status.NEVER_USED, "")

    # should refuse invalid values
    assert not e.set("!!!!")
    assert e.status == Status.NEVER_USED

    assert e.set("abc")
    assert e == Entry(Status.OCCUPIED, "abc")

    # should refuse to overwrite an occupied entry
    assert not e.set("xyz")
    assert e == Entry(Status.OCCUPIED, "abc")

    e.delete()
    assert e == Entry(Status.TOMBSTONE, "abc")

    # a tombstone can take any valid value
    assert e.set("xyz")
    assert e == Entry(Status.OCCUPIED, "xyz")


def test_entry_delete_is_unconditional():
    e = new_entry()
    e.delete()
    assert e.status == Status.TOMBSTONE
    e.delete()
    assert e.status == Status.TOMBSTONE


def test_slot_append():
    s = new_slot()
    assert s.entries == [Entry()]

    assert s.append("aa")
    assert s.append("ba")
    assert s.entries == [
        Entry(Status.OCCUPIED, "aa"),
        Entry(Status.OCCUPIED, "ba"),
        Entry(Status.NEVER_USED, ""),
    ]
    assert s.count(Status.OCCUPIED) == 2
    assert s.count(Status.NEVER_USED) == 1


def test_slot_append_invalid_still_grows():
    s = new_slot()
    assert not s.append("!!!!")
    assert len(s.entries) == 2
    assert s.count(Status.NEVER_USED) == 2


def test_slot_find():
    s = new_slot()
    s.append("aa")
    s.append("ba")

    entry, found = s.find("ba")
    assert found
    assert entry is s.entries[1]

    assert s.find("ca") == (None, False)

    # tombstoned entries are still matched by value
    s.entries[0].delete()
    entry, found = s.find("aa")
    assert found
    assert entry is s.entries[0]
    assert entry.status == Status.TOMBSTONE

    # only the empty value matches the sentinel
    entry, found = s.find("")
    assert found
    assert entry is s.entries[-1]
