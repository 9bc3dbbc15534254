"""Currency conversion: the one helper that signals bad input by raising."""
from __future__ import annotations
from typing import Optional

from jobservice.core.config import EUR_CONVERSION_RATE
from jobservice.domain.job.errors import InvalidArgumentError


class CurrencyConverter:
    def __init__(self, rate: float = EUR_CONVERSION_RATE):
        self._rate = rate

    @property
    def rate(self) -> float:
        return self._rate

    def convert_to_eur(self, amount: Optional[float]) -> float:
        """
        Convert ``amount`` to EUR at the fixed rate.
        Raises InvalidArgumentError when the amount is missing, negative or NaN;
        collapsed-result callers fold that with ``Result.map_catching``.
        """
        if amount is None or not amount >= 0.0:
            raise InvalidArgumentError("Amount must be present and non-negative")
        return amount * self._rate
