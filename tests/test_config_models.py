from pathlib import Path

import pytest
from pydantic import ValidationError

from notecards.config_models import ParserConfig, RunConfig, SchedulerConfig, load_run_config

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "config.example.yaml"


def test_defaults():
    cfg = load_run_config(None)

    assert cfg.log_level == "INFO"
    assert cfg.parser == ParserConfig(inline_separator="::", block_separator="??")
    assert cfg.scheduler.min_ease_factor == 1.3
    assert cfg.scheduler.max_interval == 365.0
    assert cfg.scheduler.mastery_consecutive_success_threshold == 3


def test_example_config_matches_defaults():
    assert load_run_config(EXAMPLE_CONFIG) == RunConfig()


def test_partial_yaml_overrides_only_given_fields(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "log_level: DEBUG\n"
        "parser:\n"
        "  inline_separator: '=>'\n"
        "scheduler:\n"
        "  max_interval: 180\n",
        encoding="utf-8",
    )
    cfg = load_run_config(path)

    assert cfg.log_level == "DEBUG"
    assert cfg.parser.inline_separator == "=>"
    assert cfg.parser.block_separator == "??"
    assert cfg.scheduler.max_interval == 180
    assert cfg.scheduler.min_interval == 1.0


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_run_config(path) == RunConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_run_config(tmp_path / "nope.yaml")


def test_invalid_values_exit_with_message(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("scheduler:\n  min_ease_factor: 3.5\n  max_ease_factor: 2.0\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        load_run_config(path)
    assert "Invalid configuration" in str(exc.value)


@pytest.mark.parametrize(
    "overrides",
    [
        {"again_interval": 0.5},
        {"min_interval": 10, "max_interval": 5},
        {"easy_interval_multiplier": 2.0, "good_interval_multiplier": 2.5},
        {"default_ease_factor": 4.0},
        {"max_review_history_length": 0},
        {"hard_interval_multiplier": 0},
    ],
)
def test_inconsistent_scheduler_config(overrides):
    with pytest.raises(ValidationError):
        SchedulerConfig(**overrides)


def test_empty_separator_rejected():
    with pytest.raises(ValidationError):
        ParserConfig(inline_separator="")
