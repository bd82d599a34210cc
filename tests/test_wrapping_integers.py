import pytest

from minnowtcp.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


@pytest.mark.parametrize(
    ("raw", "zero", "checkpoint", "expected"),
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
        (0, 1, 1, UINT32_MAX),
    ],
)
def test_unwrap(raw, zero, checkpoint, expected):
    assert Wrap32(raw).unwrap(Wrap32(zero), checkpoint) == expected


def test_wrap_reduces_modulo_two_to_the_32():
    assert Wrap32.wrap(3 * (1 << 32), Wrap32(0)) == Wrap32(0)
    assert Wrap32.wrap(3 * (1 << 32) + 17, Wrap32(15)) == Wrap32(32)
    assert Wrap32.wrap(7, Wrap32(UINT32_MAX)) == Wrap32(6)


@pytest.mark.parametrize("n", [0, 1, 12345, UINT32_MAX, 1 << 32, 5 * (1 << 32) + 99])
@pytest.mark.parametrize("isn", [0, 1, INT32_MAX, UINT32_MAX])
def test_wrap_unwrap_round_trip(n, isn):
    zero = Wrap32(isn)
    assert Wrap32.wrap(n, zero).unwrap(zero, n) == n


def test_add_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(10) + 5 == Wrap32(15)


def test_constructor_truncates_to_32_bits():
    assert Wrap32((1 << 32) + 3) == Wrap32(3)
    assert Wrap32((1 << 32) + 3).raw_value == 3


def test_equality_and_hash():
    assert Wrap32(42) == Wrap32(42)
    assert not (Wrap32(42) == Wrap32(43))
    assert len({Wrap32(42), Wrap32(42)}) == 1


def test_add_rejects_non_integers():
    with pytest.raises(TypeError):
        Wrap32(1) + "x"