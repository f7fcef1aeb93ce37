from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from arbgen import ConfigurationError
from arbgen.config import load_config


def test_user_overrides_merge(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("sampling:\n  size: 5\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.sampling.size == 5
    assert cfg.sampling.count == 10


def test_negative_size(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("sampling:\n  size: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_zero_count(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("sampling:\n  count: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file, env={}).sampling.size == 100


def test_non_mapping_top_level(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- sampling\n- seed\n")
    with pytest.raises(ConfigurationError, match="top level must be a mapping"):
        load_config(cfg_file, env={})


def test_malformed_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("sampling: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_config(cfg_file, env={})
