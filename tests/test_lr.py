from voronoikit.lr import Side


def test_other_flips():
    assert Side.LEFT.other() is Side.RIGHT
    assert Side.RIGHT.other() is Side.LEFT


def test_other_is_involution():
    assert Side.LEFT.other().other() is Side.LEFT
    assert Side.RIGHT.other().other() is Side.RIGHT


def test_other_indexes_opposite_slot():
    pair = ["a", "b"]
    assert pair[Side.LEFT.other()] == "b"
    assert pair[Side.RIGHT.other()] == "a"
    assert int(Side.RIGHT.other()) == 0
    assert int(Side.LEFT.other()) == 1