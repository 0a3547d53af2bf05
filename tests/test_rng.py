from __future__ import annotations

import secrets

from lotto649.services import rng as rng_mod
from lotto649.services.rng import Xorshift128Plus, entropy_seed, get_random_source


def test_same_seed_same_sequence() -> None:
    a = Xorshift128Plus(42)
    b = Xorshift128Plus(42)
    assert [a.next_u64() for _ in range(100)] == [b.next_u64() for _ in range(100)]


def test_different_seeds_differ() -> None:
    a = Xorshift128Plus(1)
    b = Xorshift128Plus(2)
    assert [a.next_u64() for _ in range(10)] != [b.next_u64() for _ in range(10)]


def test_values_fit_in_64_bits() -> None:
    g = Xorshift128Plus(0)
    values = [g.next_u64() for _ in range(1000)]
    assert all(0 <= v < 2**64 for v in values)
    assert len(set(values)) == 1000


def test_negative_and_large_seeds_are_reduced() -> None:
    assert Xorshift128Plus(-1).seed == 2**64 - 1
    assert Xorshift128Plus(2**64 + 5).seed == 5


def test_entropy_seed_falls_back_to_clock(monkeypatch) -> None:
    def _broken(k: int) -> int:
        raise NotImplementedError("no urandom")

    monkeypatch.setattr(rng_mod.secrets, "randbits", _broken)
    seed = entropy_seed()
    assert 0 <= seed < 2**64


def test_entropy_seed_uses_os_source(monkeypatch) -> None:
    monkeypatch.setattr(secrets, "randbits", lambda k: 12345)
    assert entropy_seed() == 12345


def test_get_random_source_with_seed_is_deterministic() -> None:
    a = get_random_source(99)
    b = get_random_source(99)
    assert a.next_u64() == b.next_u64()
