"""
Tests for create_app's use of the contract settings in Config.
"""

import logging

from app import create_app
from config import Config


class _StrictConfig(Config):
    TESTING = True
    CONTRACT_STRICT_CONTRACTS = ["vote.cast", "meeting.teleport"]


def test_unknown_strict_contract_names_warned(caplog):
    with caplog.at_level(logging.WARNING, logger="api"):
        create_app(_StrictConfig)

    warnings = [r for r in caplog.records if getattr(r, "event", None) == "unknown_strict_contracts"]
    assert len(warnings) == 1
    assert warnings[0].contracts == ["meeting.teleport"]


def test_contract_mode_logged(caplog):
    with caplog.at_level(logging.INFO, logger="api"):
        create_app()

    assert any("mode=warn" in r.getMessage() for r in caplog.records)
