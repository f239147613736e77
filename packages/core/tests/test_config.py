"""Tests for configuration loading."""

from prbump_core.config import load_config


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["page_size"] == 100
    assert config["commit_threshold"] == 250
    assert config["tag_prefix"] == ""
    assert config["classifier"] == {"minor_types": ["feat"], "major_types": []}


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".prbump.yml"
    cfg.write_text("commit_threshold: 50\ntag_prefix: release-\n")
    config = load_config(config_path=str(cfg))
    assert config["commit_threshold"] == 50
    assert config["tag_prefix"] == "release-"
    assert config["page_size"] == 100


def test_classifier_section_loaded(tmp_path):
    cfg = tmp_path / ".prbump.yml"
    cfg.write_text("classifier:\n  minor_types: [feat, feature]\n  major_types: [breaking]\n")
    config = load_config(config_path=str(cfg))
    assert config["classifier"]["minor_types"] == ["feat", "feature"]
    assert config["classifier"]["major_types"] == ["breaking"]


def test_empty_config_file_keeps_defaults(tmp_path):
    cfg = tmp_path / ".prbump.yml"
    cfg.write_text("")
    config = load_config(config_path=str(cfg))
    assert config["commit_threshold"] == 250


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".prbump.yml"
    cfg.write_text("commit_threshold: 50\n")
    config = load_config(config_path=str(cfg), cli_overrides={"commit_threshold": 10})
    assert config["commit_threshold"] == 10


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".prbump.yml"
    cfg.write_text("commit_threshold: 50\n")
    config = load_config(config_path=str(cfg), cli_overrides={"commit_threshold": None})
    assert config["commit_threshold"] == 50


def test_github_token_loaded_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["github_token"] == "gh-token"


def test_classifier_lists_are_not_shared_reference(tmp_path):
    """Mutating one config's classifier lists must not affect another."""
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["classifier"]["minor_types"].append("perf")
    assert config_b["classifier"]["minor_types"] == ["feat"]
