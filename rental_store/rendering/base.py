"""Statement renderer contract and money display options"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from rental_store.config import settings
from rental_store.domain.statement import StatementView


@dataclass(frozen=True)
class MoneyFormat:
    """How money values are displayed; passed into every render call"""

    symbol: str = "$"
    places: int = 2

    @classmethod
    def from_settings(cls) -> "MoneyFormat":
        return cls(symbol=settings.currency_symbol, places=settings.currency_places)

    def format(self, amount: Decimal) -> str:
        return f"{self.symbol}{amount:,.{self.places}f}"


class StatementRenderer(ABC):
    """Lays out a StatementView; never recomputes amounts or points"""

    name: str
    media_type: str = "text/plain"

    @abstractmethod
    def render(self, view: StatementView, money: MoneyFormat) -> str:
        pass
