from __future__ import annotations

import pytest

from rcli.process.genpass import LOWER, NUMBER, SYMBOL, UPPER, process_genpass


def test_genpass_default_contains_every_class():
    for _ in range(20):
        password = process_genpass()
        assert len(password) == 16
        for charset in (UPPER, LOWER, NUMBER, SYMBOL):
            assert any(c in charset for c in password)


def test_genpass_respects_disabled_classes():
    password = process_genpass(64, upper=False, lower=False, number=True, symbol=False)
    assert len(password) == 64
    assert set(password) <= set(NUMBER)


def test_genpass_excludes_lookalikes():
    password = process_genpass(200)
    assert not set(password) & set("Il0")


def test_genpass_requires_a_class():
    with pytest.raises(ValueError):
        process_genpass(8, False, False, False, False)


def test_genpass_length_must_cover_classes():
    with pytest.raises(ValueError):
        process_genpass(3)
    assert len(process_genpass(4)) == 4
