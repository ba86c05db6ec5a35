"""Port for persisting user-defined categorization rules."""

from typing import Protocol

from household_finance.domain.models import CategoryRule


class UserRulesStorePort(Protocol):
    def load_rules(self) -> list[CategoryRule]:
        """Return stored rules, in priority order."""

    def save_rules(self, rules: list[CategoryRule]) -> None:
        """Replace stored rules."""


__all__ = ["UserRulesStorePort"]
