"""
Tests for settings, logger setup and rich rendering
"""

import logging

import pytest
from pydantic import ValidationError
from rich.table import Table

from betterset import (
    HashSet,
    Relation,
    SetConfig,
    configure,
    configure_logging,
    relation_table,
    reset,
    rich_to_str,
    set_text,
    settings,
)


# =============================================================================
# SETTINGS
# =============================================================================


class TestSettings:
    """settings() / configure() / reset()"""

    def test_defaults(self):
        assert settings() == SetConfig(powerset_limit=20, log_level=15)

    def test_configure_merges(self):
        configure(powerset_limit=5)
        assert settings().powerset_limit == 5
        assert settings().log_level == 15

    def test_reset(self):
        configure(powerset_limit=5)
        reset()
        assert settings().powerset_limit == 20

    def test_rejects_negative_limit(self):
        with pytest.raises(ValidationError):
            configure(powerset_limit=-1)
        assert settings().powerset_limit == 20

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            configure(colour="blue")

    def test_settings_are_frozen(self):
        with pytest.raises(ValidationError):
            settings().powerset_limit = 3  # type: ignore[misc]

    def test_configure_applies_log_level(self):
        configure(log_level=logging.DEBUG)
        assert logging.getLogger("betterset").level == logging.DEBUG

    def test_reset_restores_log_level(self):
        configure(log_level=50)
        reset()
        assert logging.getLogger("betterset").level == 15

    def test_reset_leaves_unconfigured_logger_alone(self):
        reset()
        assert not logging.getLogger("betterset").handlers


# =============================================================================
# LOGGING
# =============================================================================


class TestConfigureLogging:
    """configure_logging()"""

    def test_installs_one_stream_handler(self):
        configure_logging()
        logger = configure_logging(20)
        stream_handlers = [h for h in logger.handlers
                           if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].level == 20
        assert logger.level == 20
        assert logger.propagate is False

    def test_module_loggers_are_children(self):
        assert logging.getLogger("betterset.hashset").parent is \
            logging.getLogger("betterset")


# =============================================================================
# DISPLAY
# =============================================================================


class TestDisplay:
    """rich renderings"""

    def test_empty_set_text(self):
        assert set_text(HashSet()).plain == "Ø"

    def test_set_text_matches_repr(self):
        s = HashSet(["justine", 4, [1, "hey"]])
        assert set_text(s).plain == repr(s)

    def test_relation_table(self):
        table = relation_table(Relation.from_pairs([(1, "a"), (2, "b")]))
        assert isinstance(table, Table)
        assert table.row_count == 2
        assert [c.header for c in table.columns] == ["first", "second"]

    def test_rich_to_str(self):
        out = rich_to_str(set_text(HashSet([1, 2])))
        assert "1, 2" in out
        assert out.endswith("\n")
