# domain/entities/aggregate.py
from collections.abc import Mapping
from typing import Dict, Iterator

from pydantic import BaseModel

from .trade import TradeRecord

class InstrumentAggregate(BaseModel):
    """
    Estatísticas acumuladas de um único instrumento.

    max_trade_gap segue a ordem de chegada dos registros e não é ordenado
    nem limitado a zero: registros fora de ordem geram gaps negativos.
    """
    last_trade_time: int
    max_trade_gap: int = 0
    total_volume: float
    total_consideration: float
    max_price: float
    trade_count: int = 1

    @classmethod
    def from_record(cls, record: TradeRecord) -> "InstrumentAggregate":
        """Cria o agregado a partir do primeiro negócio do instrumento."""
        return cls(
            last_trade_time=record.timestamp,
            max_trade_gap=0,
            total_volume=record.quantity,
            total_consideration=record.price * record.quantity,
            max_price=record.price,
        )

    @property
    def average_price(self) -> float:
        """Preço médio ponderado por volume (0.0 quando não há volume)."""
        if self.total_volume == 0:
            return 0.0
        return self.total_consideration / self.total_volume

class AggregateTable(Mapping):
    """
    Snapshot somente-leitura dos agregados, iterado em ordem crescente
    de instrumento.
    """

    def __init__(self, aggregates: Dict[str, InstrumentAggregate]):
        self._data = {key: aggregates[key].model_copy() for key in sorted(aggregates)}

    def __getitem__(self, instrument: str) -> InstrumentAggregate:
        return self._data[instrument].model_copy()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AggregateTable({list(self._data)})"
