import logging

import pytest

from notecards.config_models import ParserConfig, SchedulerConfig

NOW = 1_700_000_000_000


@pytest.fixture
def scheduler_config() -> SchedulerConfig:
    return SchedulerConfig()


@pytest.fixture
def parser_config() -> ParserConfig:
    return ParserConfig()


@pytest.fixture
def restore_notecards_logger():
    """setup_logging() replaces handlers and stops propagation; undo that after a test."""
    logger = logging.getLogger("notecards")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
