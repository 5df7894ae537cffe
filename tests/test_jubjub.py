import pytest

from bazuka.jubjub import (
    BASE,
    BASE_COFACTOR,
    ORDER,
    ParsePublicKeyError,
    PointAffine,
    PointCompressed,
    PointProjective,
    PublicKey,
)


def test_twisted_edwards_curve_ops():
    a = BASE.double() + BASE + BASE
    b = BASE.double().double()
    assert a == b

    c = BASE + BASE + BASE + BASE
    assert b == c

    pnt1 = BASE.to_projective().double().double() + BASE.to_projective()
    pnt2 = BASE.double().double() + BASE
    assert pnt1.to_affine() == pnt2


def test_jubjub_public_key_compression():
    p1 = BASE.multiply(123)
    p2 = p1.compress().decompress()
    assert p1 == p2


def test_base_points_on_curve():
    assert BASE.is_on_curve()
    assert BASE_COFACTOR.is_on_curve()
    assert BASE.multiply(77).is_on_curve()


def test_multiply_matches_repeated_addition():
    assert BASE.multiply(4) == BASE.double().double()
    assert BASE.multiply(3) == BASE.double() + BASE
    assert BASE.multiply(8) == BASE_COFACTOR


def test_subgroup_order_annihilates_cofactor_base():
    result = BASE_COFACTOR.multiply(ORDER)
    assert result == PointAffine.zero()
    assert result.is_infinity()


def test_zero_is_identity():
    zero = PointAffine.zero()
    assert zero.is_infinity()
    assert zero + BASE == BASE
    assert BASE.multiply(0) == zero
    assert PointProjective.zero().is_zero()
    assert PointProjective.zero().double() == PointProjective.zero()
    assert PointProjective.zero().to_affine() == zero
    assert PointProjective.zero() + BASE.to_projective() == BASE.to_projective()


def test_projective_double_matches_affine():
    assert BASE.to_projective().double().to_affine() == BASE.double()


def test_compress_keeps_parity():
    point = BASE.multiply(5)
    compressed = point.compress()
    assert compressed.x == point.x
    assert compressed.odd == bool(point.y & 1)


def test_public_key_round_trip():
    pk = PublicKey(BASE.multiply(5).compress())
    text = str(pk)
    assert len(text) == 67
    assert text[:3] in ("0x2", "0x3")
    assert PublicKey.parse(text) == pk


def test_public_key_prefix_tracks_oddity():
    assert str(PublicKey(PointCompressed(1, True))).startswith("0x3")
    assert str(PublicKey(PointCompressed(1, False))).startswith("0x2")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "0x2" + "00" * 31,
        "0x4" + "00" * 32,
        "0x2" + "zz" * 32,
        "0x2" + "f" * 64,
    ],
)
def test_invalid_public_key(text):
    with pytest.raises(ParsePublicKeyError):
        PublicKey.parse(text)