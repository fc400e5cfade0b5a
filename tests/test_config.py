"""Tests for engine configuration and TABFUZZ_* environment variables."""

import pytest

import tabfuzz as tfz
from tabfuzz.config import EngineConfig, get_config, set_config


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.workers == 1
        assert config.chunk_size is None
        assert config.backend == "process"
        assert config.prune is True

    @pytest.mark.parametrize(
        "kwargs",
        [{"workers": 0}, {"chunk_size": 0}, {"backend": "gpu"}],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(tfz.ValidationError):
            EngineConfig(**kwargs)

    def test_override_ignores_none(self):
        config = EngineConfig(workers=4)
        assert config.override() is config
        assert config.override(workers=None, prune=False) == EngineConfig(workers=4, prune=False)


class TestFromEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TABFUZZ_WORKERS", "4")
        monkeypatch.setenv("TABFUZZ_CHUNK_SIZE", "100")
        monkeypatch.setenv("TABFUZZ_BACKEND", "Thread")
        monkeypatch.setenv("TABFUZZ_DISABLE_PRUNING", "yes")
        assert EngineConfig.from_env() == EngineConfig(
            workers=4, chunk_size=100, backend="thread", prune=False
        )

    def test_empty_environment(self, monkeypatch):
        for name in ("TABFUZZ_WORKERS", "TABFUZZ_CHUNK_SIZE", "TABFUZZ_BACKEND", "TABFUZZ_DISABLE_PRUNING"):
            monkeypatch.delenv(name, raising=False)
        assert EngineConfig.from_env() == EngineConfig()

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setenv("TABFUZZ_WORKERS", "many")
        with pytest.raises(tfz.ValidationError, match="TABFUZZ_WORKERS"):
            EngineConfig.from_env()


class TestActiveConfig:
    def test_set_and_get(self):
        config = EngineConfig(workers=2, backend="thread")
        set_config(config)
        assert get_config() is config

    def test_reset_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("TABFUZZ_WORKERS", "3")
        set_config(None)
        assert get_config().workers == 3
        # Cached until reset
        monkeypatch.setenv("TABFUZZ_WORKERS", "5")
        assert get_config().workers == 3

    def test_disable_pruning_from_config(self):
        set_config(EngineConfig(prune=False))
        results = tfz.best_matches(["abc"], ["abd", "abcdefgh"], method="levenshtein")
        assert results[0].text == "abd"

    def test_arguments_win(self):
        set_config(EngineConfig(workers=1))
        results = tfz.pairwise(["a", "b"], ["a", "c"], method="levenshtein", workers=2, backend="thread")
        assert [r.score for r in results] == [0, 1]
