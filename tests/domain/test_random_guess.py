"""Unit tests for random Guess generation."""

import random
import threading

import pytest

from guessing_utils.domain.exceptions import GuessError
from guessing_utils.domain.model.guess import GUESS_MAX, GUESS_MIN, Guess
from guessing_utils.domain.service.random_guess import gen_random
from tests.fakes import FakeRandomSource


class TestGenRandom:

    def test_default_source_stays_in_range(self):
        for _ in range(10_000):
            assert GUESS_MIN <= gen_random().value <= GUESS_MAX

    def test_draws_from_closed_interval(self):
        source = FakeRandomSource([42])
        assert gen_random(source) == Guess(42)
        assert source.calls == [(0, 100)]

    def test_bounds_are_reachable(self):
        source = FakeRandomSource([0, 100])
        assert gen_random(source).value == 0
        assert gen_random(source).value == 100

    def test_seeded_source_is_deterministic(self):
        rng_a, rng_b = random.Random(1234), random.Random(1234)
        first = [gen_random(rng_a) for _ in range(20)]
        second = [gen_random(rng_b) for _ in range(20)]
        assert first == second
        assert len(set(first)) > 1

    def test_random_module_is_a_source(self):
        assert isinstance(gen_random(random), Guess)

    def test_broken_source_is_fatal_not_range_error(self):
        with pytest.raises(RuntimeError, match="outside 0-100") as excinfo:
            gen_random(FakeRandomSource([101]))
        assert not isinstance(excinfo.value, GuessError)

    def test_broken_source_logged(self, caplog):
        with pytest.raises(RuntimeError):
            gen_random(FakeRandomSource([-1]))
        assert any(r.levelname == "CRITICAL" for r in caplog.records)

    def test_concurrent_callers(self):
        results: list[Guess] = []
        lock = threading.Lock()

        def worker():
            drawn = [gen_random() for _ in range(500)]
            with lock:
                results.extend(drawn)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 4000
        assert all(GUESS_MIN <= g.value <= GUESS_MAX for g in results)
