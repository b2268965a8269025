"""
Base indicator interface.

Defines the abstract base class that all indicators must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from domain.entities.bar_series import BarSeries

T = TypeVar("T")


class Indicator(ABC, Generic[T]):
    """
    Abstract base class for multi-timeframe indicators.

    Indicators read the chart series together with a higher timeframe series
    and produce an analysis result of type T.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the indicator name."""
        ...

    @abstractmethod
    def analyze(self, chart: BarSeries, higher: BarSeries) -> T:
        """
        Analyze the given series and return a result.

        Args:
            chart: Chart (base) timeframe candles, oldest first.
            higher: Higher timeframe candles, oldest first.

        Returns:
            Analysis result of type T specific to the indicator.
        """
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset the indicator's internal state."""
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.name})>"
