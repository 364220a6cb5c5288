import random

from authsecret import utils


def test_to_base36_matches_int_parsing():
    for n in [0, 1, 35, 36, 1295, 123456789, 1700000000000]:
        assert int(utils.to_base36(n), 36) == n


def test_to_base36_negative_gets_a_minus_sign():
    assert utils.to_base36(-1) == "-1"
    assert utils.to_base36(-1000) == "-rs"
    assert int(utils.to_base36(-123456789), 36) == -123456789


def test_random_base36_token_alphabet():
    token = utils.random_base36_token(random.Random(3), 200)
    assert len(token) == 200
    assert set(token) <= set(utils.base36_digits)


def test_random_base36_token_is_seed_deterministic():
    a = utils.random_base36_token(random.Random(42), 16)
    b = utils.random_base36_token(random.Random(42), 16)
    assert a == b


def test_base64_text():
    assert utils.base64_text(b"") == ""
    assert utils.base64_text(b"\xff" * 32).endswith("=")
    assert "\n" not in utils.base64_text(b"x" * 1000)


def test_milliseconds_since_epoch(monkeypatch):
    monkeypatch.setattr(utils.time, "time", lambda: 1700000000.1234)
    assert utils.milliseconds_since_epoch() == 1700000000123
