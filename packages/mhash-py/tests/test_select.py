from mhash import create
from mhash.select import select

A = create(0x11, "0beec7b8")
B = create(0x11, "94a1be0c")
C = create(0x12, "00a8b94e")
ALL = [C, A, B]


def test_no_options_keeps_everything():
    assert select(ALL) == ALL
    assert select([]) == []


def test_select_by_algorithm():
    assert select(ALL, algorithm="sha1") == [A, B]
    assert select(ALL, algorithm=0x12) == [C]
    assert select(ALL, algorithm="blake2b") == []


def test_select_by_prefix():
    assert select(ALL, prefix="11040b") == [A]
    assert select(ALL, prefix="1104") == [A, B]
    assert select(ALL, prefix="12") == [C]
    assert select(ALL, prefix="110494A1") == [B]


def test_select_after():
    assert select(ALL, after=A) == [C, B]
    assert select(ALL, after=C) == []
    assert select(ALL, after=create(0x11, "00")) == ALL


def test_options_compose():
    assert select(ALL, algorithm="sha1", after=A) == [B]
    assert select(ALL, algorithm="sha1", prefix="12") == []
