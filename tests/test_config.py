"""
Configuration tests: TOML loading, env overrides and depth validation.
"""

import logging

import pytest

from chessbro.config import (
    MAX_SEARCH_DEPTH,
    PIECE_VALUES,
    Config,
    apply_env_overrides,
    parse_depth,
)

CONFIG_LOGGER = "chessbro.config"


# ════════════════════════════════════════════════════════════════════════════
#  TOML LOADING
# ════════════════════════════════════════════════════════════════════════════

class TestLoadFromToml:
    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = Config.load_from_toml(str(tmp_path / "nope.toml"))
        assert cfg == Config()
        assert cfg.search.depth == 2
        assert cfg.eval.piece_values == PIECE_VALUES
        assert cfg.ui.engine_name == "ChessBro"

    def test_known_keys_merged(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            'log_level = "DEBUG"\n'
            "[search]\n"
            "depth = 3\n"
            "use_alpha_beta = false\n"
            "[ui]\n"
            'engine_name = "Tester"\n'
        )
        cfg = Config.load_from_toml(str(path))
        assert cfg.search.depth == 3
        assert cfg.search.use_alpha_beta is False
        assert cfg.search.use_transposition is True
        assert cfg.ui.engine_name == "Tester"
        assert cfg.ui.emit_search_info is True
        assert cfg.log_level == "DEBUG"

    def test_unknown_key_warns_and_is_skipped(self, tmp_path, caplog):
        path = tmp_path / "config.toml"
        path.write_text("[search]\nhash_size_mb = 64\ndepth = 4\n")
        with caplog.at_level(logging.WARNING, logger=CONFIG_LOGGER):
            cfg = Config.load_from_toml(str(path))
        assert not hasattr(cfg.search, "hash_size_mb")
        assert cfg.search.depth == 4
        assert "search.hash_size_mb" in caplog.text


# ════════════════════════════════════════════════════════════════════════════
#  ENVIRONMENT OVERRIDES
# ════════════════════════════════════════════════════════════════════════════

class TestEnvOverrides:
    def test_depth_override(self, monkeypatch):
        monkeypatch.setenv("CHESSBRO_SEARCH_DEPTH", "5")
        cfg = apply_env_overrides(Config())
        assert cfg.search.depth == 5

    def test_no_override(self, monkeypatch):
        monkeypatch.delenv("CHESSBRO_SEARCH_DEPTH", raising=False)
        assert apply_env_overrides(Config()).search.depth == 2

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", "2.5", str(MAX_SEARCH_DEPTH + 1)])
    def test_bad_override_logged_and_ignored(self, monkeypatch, caplog, raw):
        monkeypatch.setenv("CHESSBRO_SEARCH_DEPTH", raw)
        with caplog.at_level(logging.WARNING, logger=CONFIG_LOGGER):
            cfg = apply_env_overrides(Config())
        assert cfg.search.depth == 2
        assert "CHESSBRO_SEARCH_DEPTH" in caplog.text

    def test_explicit_environ_mapping(self):
        cfg = apply_env_overrides(Config(), {"CHESSBRO_SEARCH_DEPTH": "1"})
        assert cfg.search.depth == 1


class TestParseDepth:
    @pytest.mark.parametrize("value,expected", [
        ("1", 1),
        ("3", 3),
        (" 7 ", 7),
        (str(MAX_SEARCH_DEPTH), MAX_SEARCH_DEPTH),
        (4, 4),
    ])
    def test_valid(self, value, expected):
        assert parse_depth(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "0", "-3", "2.5", str(MAX_SEARCH_DEPTH + 1)])
    def test_invalid(self, value):
        assert parse_depth(value) is None
