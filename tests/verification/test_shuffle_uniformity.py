"""
Tests for the shuffle uniformity check.
"""

import json
import random

import numpy as np
import pytest

from hitstand.common.deck import Deck
from hitstand.verification import check_uniformity, chi_square, position_counts
from hitstand.verification.__main__ import main


def test_position_counts_shape_and_margins():
    counts = position_counts(200, random.Random(1))
    assert counts.shape == (52, 52)
    # Every card appears once per deck, and every position holds one card per deck
    assert (counts.sum(axis=0) == 200).all()
    assert (counts.sum(axis=1) == 200).all()


def test_position_counts_rejects_zero_trials():
    with pytest.raises(ValueError):
        position_counts(0)


def test_unshuffled_deck_fails(monkeypatch):
    monkeypatch.setattr(Deck, "shuffle", lambda self, rng=None: self)
    report = check_uniformity(100)
    assert report.p_value < 1e-12
    assert not report.is_uniform


def test_identity_table_is_not_uniform():
    statistic, p_value = chi_square(np.eye(52, dtype=np.int64) * 100)
    assert statistic > 0
    assert p_value < 1e-12


def test_perfectly_flat_table_is_uniform():
    statistic, p_value = chi_square(np.full((52, 52), 10, dtype=np.int64))
    assert statistic == 0.0
    assert p_value == pytest.approx(1.0)


def test_shuffle_is_uniform():
    report = check_uniformity(3000, random.Random(12345), alpha=1e-6)
    assert report.trials == 3000
    assert report.is_uniform
    assert report.to_dict()["is_uniform"] is True


def test_cli_reports_json(capsys):
    code = main(["--trials", "500", "--seed", "7", "--alpha", "1e-9"])
    output = json.loads(capsys.readouterr().out)
    assert code == 0
    assert output["trials"] == 500
    assert output["is_uniform"] is True


def test_cli_fails_on_unshuffled_deck(monkeypatch, capsys):
    monkeypatch.setattr(Deck, "shuffle", lambda self, rng=None: self)
    assert main(["--trials", "50"]) == 1
    assert json.loads(capsys.readouterr().out)["is_uniform"] is False
