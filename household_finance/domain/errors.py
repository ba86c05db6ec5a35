"""Domain error taxonomy."""


class HouseholdFinanceError(Exception):
    """Base class for errors surfaced to callers."""


class AuthenticationError(HouseholdFinanceError):
    """Raised when an operation requires an authenticated session."""


class FetchError(HouseholdFinanceError):
    """Raised when a backing store or remote service fails or rejects."""


class MissingRateError(HouseholdFinanceError):
    """Raised when a currency conversion lacks a required exchange rate."""

    def __init__(self, currency_code: str, base: str | None = None) -> None:
        self.currency_code = currency_code
        self.base = base
        detail = f" (rates quoted against {base})" if base else ""
        super().__init__(
            f"Missing exchange rate for {currency_code}{detail}"
        )


__all__ = [
    "HouseholdFinanceError",
    "AuthenticationError",
    "FetchError",
    "MissingRateError",
]
