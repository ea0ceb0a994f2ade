import pytest

from oraquadra.reed_solomon import generator_polynomial, multiply, remainder

HELLO_WORLD_1M_DATA = bytes(
    [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
)


def test_multiply_identity_and_zero():
    for value in range(256):
        assert multiply(value, 1) == value
        assert multiply(1, value) == value
        assert multiply(value, 0) == 0
        assert multiply(0, value) == 0


@pytest.mark.parametrize("x,y", [(3, 7), (0x53, 0xCA), (255, 254), (128, 2)])
def test_multiply_is_commutative(x, y):
    assert multiply(x, y) == multiply(y, x)


def test_multiply_distributes_over_xor():
    for a, b, c in [(5, 9, 200), (0x80, 0x7F, 0x11), (255, 1, 2)]:
        assert multiply(a, b ^ c) == multiply(a, b) ^ multiply(a, c)


def test_multiply_is_associative():
    assert multiply(multiply(17, 33), 99) == multiply(17, multiply(33, 99))


def test_multiply_stays_in_field():
    assert all(0 <= multiply(x, 0xFF) <= 0xFF for x in range(256))


@pytest.mark.parametrize("x,y", [(256, 1), (1, -1)])
def test_multiply_rejects_out_of_range(x, y):
    with pytest.raises(ValueError):
        multiply(x, y)


def test_generator_polynomial_degree_one():
    assert generator_polynomial(1) == [1]


def test_generator_polynomial_degree_seven():
    assert generator_polynomial(7) == [127, 122, 154, 164, 11, 68, 117]


@pytest.mark.parametrize("degree", [2, 10, 26, 30])
def test_generator_polynomial_length(degree):
    assert len(generator_polynomial(degree)) == degree


def test_generator_polynomial_rejects_zero_degree():
    with pytest.raises(ValueError):
        generator_polynomial(0)


def test_remainder_of_known_codeword():
    ecc = remainder(generator_polynomial(10), HELLO_WORLD_1M_DATA)
    assert list(ecc) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


@pytest.mark.parametrize("degree", [7, 10, 18])
def test_codeword_is_divisible_by_generator(degree):
    coefficients = generator_polynomial(degree)
    data = bytes(range(40, 60))
    ecc = remainder(coefficients, data)
    assert len(ecc) == degree
    assert remainder(coefficients, data + ecc) == bytes(degree)


def test_remainder_of_empty_data_is_zero():
    assert remainder(generator_polynomial(5), b"") == bytes(5)


def test_remainder_is_linear():
    coefficients = generator_polynomial(8)
    a = bytes([1, 2, 3, 4, 5])
    b = bytes([9, 8, 7, 6, 250])
    combined = bytes(x ^ y for x, y in zip(a, b))
    expected = bytes(
        x ^ y for x, y in zip(remainder(coefficients, a), remainder(coefficients, b))
    )
    assert remainder(coefficients, combined) == expected


def test_remainder_rejects_empty_generator():
    with pytest.raises(ValueError):
        remainder([], b"\x01")


def test_remainder_rejects_non_byte_data():
    with pytest.raises(ValueError):
        remainder(generator_polynomial(3), [1, 300])