"""Tests for the JSON user rules store."""

import json
from unittest.mock import MagicMock

import pytest

from household_finance.domain.models import CategoryRule
from household_finance.infrastructure.rules_store import JsonUserRulesStore


def test_missing_file_yields_no_rules(tmp_path):
    store = JsonUserRulesStore(tmp_path / "rules.json", logger=MagicMock())

    assert store.load_rules() == []


def test_save_then_load_keeps_order(tmp_path):
    path = tmp_path / "nested" / "rules.json"
    store = JsonUserRulesStore(path, logger=MagicMock())
    rules = [
        CategoryRule(["bakery", "carlton"], "Food"),
        CategoryRule(["gym"], "Health"),
    ]

    store.save_rules(rules)

    assert json.loads(path.read_text(encoding="utf-8"))["rules"][1] == {
        "keywords": ["gym"],
        "category": "Health",
    }
    assert JsonUserRulesStore(path, logger=MagicMock()).load_rules() == rules


def test_corrupt_file_is_logged_and_ignored(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text("{not json", encoding="utf-8")
    logger = MagicMock()

    assert JsonUserRulesStore(path, logger=logger).load_rules() == []
    logger.error.assert_called_once()


def test_malformed_entries_are_skipped(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps(
            {
                "rules": [
                    {"keywords": "gym", "category": "Health"},
                    {"keywords": ["gym"]},
                    "junk",
                    {"keywords": ["cinema"], "category": "Entertainment"},
                ]
            }
        ),
        encoding="utf-8",
    )

    rules = JsonUserRulesStore(path, logger=MagicMock()).load_rules()

    assert rules == [CategoryRule(["cinema"], "Entertainment")]


def test_undecodable_file_is_logged_and_ignored(tmp_path):
    path = tmp_path / "rules.json"
    path.write_bytes(b'{"rules": [\xff\xfe]}')
    logger = MagicMock()

    assert JsonUserRulesStore(path, logger=logger).load_rules() == []
    logger.error.assert_called_once()


@pytest.mark.parametrize("payload", ['{"rules": null}', '{"rules": 5}', "[]"])
def test_missing_rules_list_is_logged_and_ignored(tmp_path, payload):
    path = tmp_path / "rules.json"
    path.write_text(payload, encoding="utf-8")
    logger = MagicMock()

    assert JsonUserRulesStore(path, logger=logger).load_rules() == []
    logger.error.assert_called_once()
