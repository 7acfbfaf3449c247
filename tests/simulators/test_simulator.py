"""End-to-end tests for the synthetic market simulator."""

import math

import numpy as np
import pytest

from src.simulators import PathGenerator, SimulationConfig, SyntheticSimulator


@pytest.fixture
def scenario_config():
    """3 assets, zero drift, 1000 ticks, 10 blocks of 100"""
    return SimulationConfig(
        initial_cash=1000.0,
        window=50,
        interval=50,
        tick_count=1000,
        blocks=10,
        mu=[0.0, 0.0, 0.0],
        sigma=[0.001, 0.01, 0.1],
        seed=2024,
    )


class TestSyntheticSimulator:
    """Test SyntheticSimulator runs."""

    def test_reference_scenario(self, scenario_config, history_file):
        """Liquidated total is finite and non-negative after every block."""
        simulator = SyntheticSimulator(scenario_config)

        result = simulator.run(history_path=history_file)

        assert history_file.exists()
        assert [s.tick for s in result.snapshots] == list(range(100, 1001, 100))
        for snapshot in result.snapshots:
            assert math.isfinite(snapshot.total_value)
            assert snapshot.total_value >= 0.0
            assert snapshot.cash >= 0.0
            assert snapshot.profits == pytest.approx(snapshot.total_value - 1000.0)
        assert result.final_value == pytest.approx(result.snapshots[-1].total_value)

    def test_in_memory_run(self, scenario_config):
        result = SyntheticSimulator(scenario_config).run()

        assert len(result.snapshots) == 10
        assert math.isfinite(result.final_value)

    def test_file_and_memory_runs_agree(self, scenario_config, history_file):
        """Replaying through the file format does not change the outcome."""
        from_file = SyntheticSimulator(scenario_config).run(history_path=history_file)
        in_memory = SyntheticSimulator(scenario_config).run()

        assert from_file.final_value == pytest.approx(in_memory.final_value, rel=1e-12)

    def test_seeded_runs_reproduce(self, scenario_config):
        first = SyntheticSimulator(scenario_config).run()
        second = SyntheticSimulator(scenario_config).run()

        assert first.final_value == second.final_value
        assert first.total_trades == second.total_trades

    def test_no_volatility_means_no_trades(self):
        config = SimulationConfig(mu=[0.0, 0.0], sigma=[0.0, 0.0], tick_count=300, blocks=3)

        result = SyntheticSimulator(config).run()

        assert result.total_trades == 0
        assert result.final_value == pytest.approx(1000.0)

    def test_trades_are_recorded(self):
        config = SimulationConfig(mu=[0.0], sigma=[0.5], tick_count=2000, blocks=4, interval=5, seed=1)

        result = SyntheticSimulator(config).run()

        assert result.total_trades == result.buy_trades + result.sell_trades
        assert result.buy_trades > 0

    def test_progress_callback(self, scenario_config):
        progress = []

        SyntheticSimulator(scenario_config).run(
            progress_callback=lambda snapshot, fraction: progress.append((snapshot.tick, fraction))
        )

        assert progress[0] == (100, 0.1)
        assert progress[-1] == (1000, 1.0)

    def test_short_history_file(self, scenario_config, history_file):
        """A file holding fewer ticks than configured runs what it has."""
        simulator = SyntheticSimulator(scenario_config)
        simulator.generate_history(history_file)
        lines = history_file.read_text().splitlines(keepends=True)
        history_file.write_text("".join(lines[:251]))

        market = simulator.load_market(history_file)

        assert market.tick_count == 250

    def test_injected_generator(self, scenario_config):
        generator = PathGenerator(np.random.default_rng(5))

        simulator = SyntheticSimulator(scenario_config, generator=generator)

        assert simulator.generator is generator
        assert simulator.build_market().tick_count == 1000

    def test_short_history_truncates_blocks(self, scenario_config, history_file, monkeypatch):
        """Blocks stop at the end of a short file instead of overrunning it."""
        simulator = SyntheticSimulator(scenario_config)
        load_market = simulator.load_market

        def load_short(path):
            lines = path.read_text().splitlines(keepends=True)
            path.write_text("".join(lines[:251]))
            return load_market(path)

        monkeypatch.setattr(simulator, "load_market", load_short)

        result = simulator.run(history_path=history_file)

        assert [s.tick for s in result.snapshots] == [100, 200, 250]
        assert result.tick_count == 250
