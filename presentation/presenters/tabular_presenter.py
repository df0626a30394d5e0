"""
Apresentador tabular de referência.
Uma linha por instrumento: instrumento,maxGap,volume,precoMedio,precoMax
"""

import logging
import math
from typing import TextIO

from domain.entities.aggregate import AggregateTable, InstrumentAggregate
from application.interfaces.data_presenter import IDataPresenter

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Representação decimal natural: valores inteiros sem '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class TabularPresenter(IDataPresenter):
    """
    Formata a tabela de agregados em linhas separadas por vírgula,
    em ordem crescente de instrumento.
    """

    SEPARATOR = ","

    def render(self, sink: TextIO, table: AggregateTable) -> None:
        for instrument in sorted(table):
            sink.write(self.format_line(instrument, table[instrument]) + "\n")

    def format_line(self, instrument: str, aggregate: InstrumentAggregate) -> str:
        if aggregate.total_volume == 0:
            logger.warning(f"Volume total zero para {instrument}, preço médio reportado como 0")

        average = aggregate.average_price
        if math.isfinite(average):
            # Truncado em direção a zero, não arredondado
            average_price = int(average)
        else:
            logger.warning(f"Preço médio não finito ({average}) para {instrument}, reportado como 0")
            average_price = 0

        return self.SEPARATOR.join([
            instrument,
            str(aggregate.max_trade_gap),
            format_number(aggregate.total_volume),
            str(average_price),
            format_number(aggregate.max_price)
        ])
