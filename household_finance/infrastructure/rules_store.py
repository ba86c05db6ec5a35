"""JSON file store for user-defined categorization rules."""

import json
from pathlib import Path

from household_finance.application.ports.rules_store import (
    UserRulesStorePort,
)
from household_finance.domain.models import CategoryRule
from household_finance.infrastructure.logging.logger import get_app_logger


class JsonUserRulesStore(UserRulesStorePort):
    """Persist rules as ``{"rules": [{"keywords": [...], "category": ...}]}``."""

    def __init__(self, path: Path, logger=None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def load_rules(self) -> list[CategoryRule]:
        """Return stored rules; an unreadable file yields no rules."""
        if not self._path.exists():
            return []
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (ValueError, OSError) as exc:
            self._logger.error(
                f"Failed to load category rules from {self._path}: {exc}"
            )
            return []

        entries = data.get("rules") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            self._logger.error(
                f"Category rules file {self._path} has no rules list"
            )
            return []
        rules = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            keywords = entry.get("keywords")
            category = entry.get("category")
            if not isinstance(keywords, list) or not category:
                continue
            rules.append(
                CategoryRule(
                    keywords=[str(keyword) for keyword in keywords],
                    category=str(category),
                )
            )
        self._logger.info(f"Loaded {len(rules)} user category rules")
        return rules

    def save_rules(self, rules: list[CategoryRule]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "rules": [
                {"keywords": list(rule.keywords), "category": rule.category}
                for rule in rules
            ]
        }
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)


__all__ = ["JsonUserRulesStore"]
