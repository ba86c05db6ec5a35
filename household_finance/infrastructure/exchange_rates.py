"""HTTP provider for exchange-rate tables."""

import httpx

from household_finance.application.ports.exchange_rates import (
    ExchangeRatesPort,
)
from household_finance.domain.errors import FetchError
from household_finance.domain.models import ExchangeRates
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.infrastructure.settings import DEFAULT_RATES_URL
from household_finance.utils.decimal_utils import coerce_decimal


class HttpExchangeRatesProvider(ExchangeRatesPort):
    """Load rates from an open.er-api.com compatible endpoint.

    The endpoint is called as ``GET {base_url}/{BASE}`` and must answer with
    a JSON object holding a ``rates`` mapping.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_RATES_URL,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
        logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            base_url: Endpoint prefix; the base currency is appended.
            timeout: Request timeout in seconds.
            client: Optional shared client (tests inject a mock transport).
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client
        self._logger = logger or get_app_logger()

    def fetch_rates(self, base_currency: str) -> ExchangeRates:
        """Return rates quoted against ``base_currency``.

        Raises:
            FetchError: On network failure, a non-2xx answer, or a payload
                without rates.
        """
        url = f"{self._base_url}/{base_currency}"
        try:
            response = self._get(url)
        except httpx.HTTPError as exc:
            self._logger.error(f"Failed to fetch exchange rates: {exc}")
            raise FetchError(
                f"Failed to fetch exchange rates for {base_currency}"
            ) from exc

        if not response.is_success:
            self._logger.error(
                f"Exchange rate API returned status {response.status_code}"
            )
            raise FetchError(
                "Exchange rate API returned status "
                f"{response.status_code} for {base_currency}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError("Exchange rate API returned invalid JSON") from exc

        raw_rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(raw_rates, dict):
            raise FetchError("Exchange rate API payload has no rates")

        rates = {
            str(code).upper(): coerce_decimal(value)
            for code, value in raw_rates.items()
        }
        base = str(payload.get("base_code") or base_currency).upper()
        self._logger.info(f"Fetched {len(rates)} exchange rates for {base}")
        return ExchangeRates(base=base, rates=rates)

    def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url, timeout=self._timeout)
        with httpx.Client(timeout=self._timeout) as client:
            return client.get(url)


__all__ = ["HttpExchangeRatesProvider"]
