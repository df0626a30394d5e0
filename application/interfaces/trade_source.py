from abc import ABC, abstractmethod
from typing import Dict, Iterator
from domain.entities.trade import TradeRecord

class ITradeSource(ABC):
    """Interface para fontes de registros de negócios."""

    @abstractmethod
    def has_next(self) -> bool:
        """Avança até o próximo registro válido, se houver."""

    @abstractmethod
    def get_next(self) -> TradeRecord:
        """Retorna o registro encontrado pelo último has_next()."""

    @abstractmethod
    def get_stats(self) -> Dict[str, int]:
        """Retorna contadores de leitura (lines_read, records_accepted, lines_skipped)."""

    def __iter__(self) -> Iterator[TradeRecord]:
        while self.has_next():
            yield self.get_next()
