# application/services/aggregation_engine.py
from typing import Dict, Optional, Any, TextIO
import logging

from domain.entities.trade import TradeRecord
from domain.entities.aggregate import InstrumentAggregate, AggregateTable
from application.interfaces.data_presenter import Presenter

logger = logging.getLogger(__name__)

class AggregationEngine:
    """
    Mantém as estatísticas por instrumento e entrega a tabela final ao
    apresentador ativo.
    Não é thread-safe: espera um único escritor chamando add_record em sequência.
    """

    def __init__(self, presenter: Optional[Presenter] = None):
        self.aggregates: Dict[str, InstrumentAggregate] = {}
        self.presenter = presenter

        # Estatísticas
        self.stats = {
            'records_added': 0,
            'instruments_created': 0
        }

        logger.info("AggregationEngine inicializado")

    def add_record(self, record: TradeRecord) -> None:
        """Incorpora um negócio ao agregado do seu instrumento."""
        aggregate = self.aggregates.get(record.instrument)

        if aggregate is None:
            self.aggregates[record.instrument] = InstrumentAggregate.from_record(record)
            self.stats['instruments_created'] += 1
        else:
            # O gap usa o último horário ANTES de ser sobrescrito
            gap = record.timestamp - aggregate.last_trade_time
            if aggregate.trade_count == 1:
                aggregate.max_trade_gap = gap
            else:
                aggregate.max_trade_gap = max(aggregate.max_trade_gap, gap)
            aggregate.max_price = max(aggregate.max_price, record.price)
            aggregate.last_trade_time = record.timestamp
            aggregate.total_volume += record.quantity
            aggregate.total_consideration += record.price * record.quantity
            aggregate.trade_count += 1

        self.stats['records_added'] += 1

    def get_aggregate(self, instrument: str) -> Optional[InstrumentAggregate]:
        """Retorna uma cópia do agregado de um instrumento, se existir."""
        aggregate = self.aggregates.get(instrument)
        return aggregate.model_copy() if aggregate else None

    def get_table(self) -> AggregateTable:
        """Retorna um snapshot somente-leitura da tabela de agregados."""
        return AggregateTable(self.aggregates)

    def set_presenter(self, presenter: Optional[Presenter]) -> None:
        """Define o apresentador ativo (o último definido prevalece)."""
        self.presenter = presenter

    def present(self, sink: TextIO) -> None:
        """Entrega o snapshot ao apresentador ativo; sem apresentador não faz nada."""
        if self.presenter is None:
            logger.debug("Nenhum apresentador definido, nada a apresentar")
            return

        self.presenter(sink, self.get_table())

    def clear(self) -> None:
        """Descarta todos os agregados e zera as estatísticas."""
        total_removed = len(self.aggregates)
        self.aggregates.clear()
        for key in self.stats:
            self.stats[key] = 0
        logger.info(f"Agregados descartados: {total_removed} instrumentos removidos")

    def get_stats(self) -> Dict[str, Any]:
        """Retorna estatísticas de uso do engine."""
        return {
            'records_added': self.stats['records_added'],
            'instruments': len(self.aggregates),
            'instruments_created': self.stats['instruments_created']
        }
