import random

import pytest

from stronghold.army import Army
from stronghold.battle import ConflictResolver, Outcome, apply_battle_effects
from stronghold.economy import Economy
from stronghold.society import Leadership


class _NoLuck:
    def randrange(self, n):
        return 0


@pytest.fixture
def resolver(tmp_path):
    return ConflictResolver(tmp_path / "battles.txt", rng=_NoLuck())


def _army(trained, morale=100):
    return Army(0, 0, 0, trained_soldiers=trained, morale=morale)


def test_strong_attacker_wins(resolver):
    outcome = resolver.resolve(
        _army(100), _army(10), Leadership("A"), Leadership("B", stable=False)
    )
    assert outcome is Outcome.ATTACKER_WINS
    assert resolver.history()[-1].endswith("|Outcome:ATTACKER_WINS")


def test_strong_defender_wins(resolver):
    outcome = resolver.resolve(
        _army(10), _army(100), Leadership("A", stable=False), Leadership("B")
    )
    assert outcome is Outcome.DEFENDER_WINS


def test_even_sides_stalemate(resolver):
    outcome = resolver.resolve(
        _army(40), _army(40), Leadership("A", stable=False), Leadership("B", stable=False)
    )
    assert outcome is Outcome.STALEMATE
    assert resolver.history()[-1].startswith("Attacker:")


def test_history_accumulates(resolver):
    assert resolver.history() == []
    for _ in range(3):
        resolver.resolve(_army(30), _army(30), Leadership("A"), Leadership("B"))
    assert len(resolver.history()) == 3


def test_empty_armies_do_not_crash(tmp_path):
    resolver = ConflictResolver(tmp_path / "b.txt", rng=random.Random(1))
    outcome = resolver.resolve(_army(0), _army(0), Leadership("A"), Leadership("B"))
    assert outcome is Outcome.STALEMATE


def test_attacker_wins_effects():
    winner, loser = _army(40, morale=95), _army(40, morale=60)
    economy = Economy(1000.0)
    apply_battle_effects(Outcome.ATTACKER_WINS, winner, loser, economy)
    assert loser.trained_soldiers == 40 // 2
    assert winner.morale == 100
    assert economy.treasury == 1000.0 + loser.trained_soldiers * 3
    assert winner.corruption == 5
    assert loser.corruption == 8


def test_defender_wins_effects():
    winner, loser = _army(50), _army(50, morale=10)
    economy = Economy(1000.0)
    apply_battle_effects(Outcome.DEFENDER_WINS, winner, loser, economy)
    assert winner.trained_soldiers == int(50 * 0.6)
    assert loser.morale == 0
    assert economy.treasury == 1000.0


def test_stalemate_effects():
    winner, loser = _army(50), _army(20)
    winner.corruption = 98
    economy = Economy(1000.0)
    apply_battle_effects(Outcome.STALEMATE, winner, loser, economy)
    assert winner.trained_soldiers == int(50 * 0.8)
    assert loser.trained_soldiers == int(20 * 0.8)
    assert economy.treasury == 1000.0 - (winner.trained_soldiers + loser.trained_soldiers)
    assert winner.corruption == 100