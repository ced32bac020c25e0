from simpledb.rid import RID


def test_fields():
    rid = RID(3, 7)
    assert rid.block_number == 3
    assert rid.slot == 7


def test_equality():
    assert RID(1, 2) == RID(1, 2)
    assert not RID(1, 2) == RID(2, 1)
    assert len({RID(1, 2), RID(1, 2), RID(0, 2)}) == 2


def test_str():
    assert str(RID(0, -1)) == "[0, -1]"