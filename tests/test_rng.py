import pytest

from mazegen.rng import RNGManager


def test_same_seed_same_stream():
    a = RNGManager(1234).context_rng("maze", "rect", "prim")
    b = RNGManager(1234).context_rng("maze", "rect", "prim")
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_context_and_seed_change_the_stream():
    rngm = RNGManager(1234)
    assert rngm.derive_seed("maze", "rect", "prim") == rngm.derive_seed("maze", "rect", "prim")
    assert rngm.derive_seed("maze", "rect", "prim") != rngm.derive_seed("maze", "hexa", "prim")
    assert rngm.derive_seed("maze", "rect", "prim") != rngm.derive_seed("maze", "rect", "wilson")
    assert RNGManager(1).derive_seed("maze") != RNGManager(2).derive_seed("maze")


def test_missing_seed_is_drawn_and_kept():
    rngm = RNGManager()
    assert rngm.seed >= 0
    assert rngm.derive_seed("maze") == RNGManager(rngm.seed).derive_seed("maze")


def test_negative_seed_is_rejected():
    with pytest.raises(ValueError):
        RNGManager(-1)
