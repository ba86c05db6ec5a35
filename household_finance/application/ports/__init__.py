"""Application ports package."""

from .category_repository import CategoryRepositoryPort
from .database import DatabaseEnginePort
from .exchange_rates import ExchangeRatesPort
from .ledger_repository import LedgerRepositoryPort
from .rules_store import UserRulesStorePort

__all__ = [
    "CategoryRepositoryPort",
    "DatabaseEnginePort",
    "ExchangeRatesPort",
    "LedgerRepositoryPort",
    "UserRulesStorePort",
]
