"""Tests for synthetic price path generation."""

import numpy as np
import pytest

from src.simulators.synthetic import PathGenerator, default_generator, log_to_price, set_default_generator


class TestPathGenerator:
    """Test PathGenerator."""

    def test_shape(self, rng):
        paths = PathGenerator(rng).generate([0.0, 0.1], [1.0, 2.0], 25)

        assert paths.shape == (25, 2)

    @pytest.mark.parametrize("mu,sigma", [
        ([0.0, 0.0, 0.0], [0.001, 0.01, 0.1]),
        ([5.0, -3.0], [10.0, 0.0]),
    ])
    def test_first_tick_is_zero(self, rng, mu, sigma):
        """Every path starts at log-price 0, i.e. price 1."""
        paths = PathGenerator(rng).generate(mu, sigma, 10)

        assert np.all(paths[0] == 0.0)

    def test_zero_volatility_is_pure_drift(self, rng):
        paths = PathGenerator(rng).generate([0.5, -1.0], [0.0, 0.0], 5)

        expected = np.arange(5)[:, np.newaxis] * np.array([0.5, -1.0])
        np.testing.assert_allclose(paths, expected)

    def test_seeded_generators_reproduce(self):
        a = PathGenerator(seed=7).generate([0.0], [1.0], 50)
        b = PathGenerator(seed=7).generate([0.0], [1.0], 50)

        np.testing.assert_array_equal(a, b)

    def test_consecutive_calls_continue_stream(self):
        """A second call draws fresh numbers from the same stream."""
        generator = PathGenerator(seed=7)

        first = generator.generate([0.0], [1.0], 50)
        second = generator.generate([0.0], [1.0], 50)

        assert not np.array_equal(first, second)

    def test_increments_are_independent_per_asset(self, rng):
        """Assets with equal parameters do not share draws."""
        paths = PathGenerator(rng).generate([0.0, 0.0], [1.0, 1.0], 20)

        assert not np.array_equal(paths[:, 0], paths[:, 1])

    def test_late_tick_spread_matches_sigma(self):
        """Spread across assets at a late tick is sigma, not sigma * sqrt(t)."""
        paths = PathGenerator(seed=1).generate([0.0] * 4000, [1.0] * 4000, 901)

        assert paths[900].std() == pytest.approx(1.0, abs=0.1)

    def test_late_tick_centred_on_drift(self):
        paths = PathGenerator(seed=2).generate([0.01] * 4000, [0.1] * 4000, 901)

        assert paths[900].mean() == pytest.approx(9.0, abs=0.01)

    def test_ticks_are_independent_draws(self):
        """Each tick scatters around the drift line with the same spread."""
        paths = PathGenerator(seed=3).generate([0.0, 0.0], [0.1, 1.0], 5001)
        spread = paths[1:].std(axis=0)

        assert spread[0] == pytest.approx(0.1, rel=0.1)
        assert spread[1] == pytest.approx(1.0, rel=0.1)
        # consecutive ticks do not carry over: lag-1 correlation is near zero
        lagged = np.corrcoef(paths[1:-1, 1], paths[2:, 1])[0, 1]
        assert abs(lagged) < 0.1

    def test_inputs_not_mutated(self, rng):
        mu = [0.1, 0.2]
        sigma = [1.0, 2.0]

        PathGenerator(rng).generate(mu, sigma, 10)

        assert mu == [0.1, 0.2]
        assert sigma == [1.0, 2.0]

    def test_zero_ticks(self, rng):
        assert PathGenerator(rng).generate([0.0, 0.0], [1.0, 1.0], 0).shape == (0, 2)

    def test_mismatched_lengths(self, rng):
        with pytest.raises(ValueError, match="equal length"):
            PathGenerator(rng).generate([0.0, 0.0], [1.0], 10)

    def test_negative_volatility(self, rng):
        with pytest.raises(ValueError, match="Volatility"):
            PathGenerator(rng).generate([0.0], [-1.0], 10)


class TestLogToPrice:
    """Test log-price conversion."""

    def test_transposes_and_exponentiates(self):
        log_prices = np.array([[0.0, 0.0], [np.log(2.0), np.log(3.0)], [0.0, np.log(0.5)]])

        prices = log_to_price(log_prices)

        assert prices.shape == (2, 3)
        np.testing.assert_allclose(prices[0], [1.0, 2.0, 1.0])
        np.testing.assert_allclose(prices[1], [1.0, 3.0, 0.5])


class TestDefaultGenerator:
    """Test the process-wide generator."""

    def test_created_once(self):
        previous = set_default_generator(None)
        try:
            assert default_generator() is default_generator()
        finally:
            set_default_generator(previous)

    @pytest.mark.usefixtures("seeded_default_generator")
    def test_replace_returns_previous(self):
        installed = default_generator()
        replacement = PathGenerator(seed=1)

        assert set_default_generator(replacement) is installed
        assert default_generator() is replacement
