# infrastructure/data_sources/csv_trade_reader.py
import re
import logging
from typing import Iterable, Iterator, Optional, Dict

from domain.entities.trade import TradeRecord
from application.interfaces.trade_source import ITradeSource
from config import settings

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = r"[0-9]+,[a-z]+,[0-9]+,[0-9]+"

class CsvTradeReader(ITradeSource):
    """
    Implementação de ITradeSource que lê negócios de linhas de texto
    no formato timestamp,instrumento,quantidade,preço.

    Linhas fora do formato são registradas no log e descartadas, sem
    interromper a leitura.
    """
    def __init__(self, lines: Iterable[str], pattern: Optional[str] = None):
        self.lines: Iterator[str] = iter(lines)
        if pattern is None:
            pattern = settings.PARSER_CONFIG.get('pattern', DEFAULT_PATTERN)
        self.format = re.compile(pattern)
        self.line: Optional[str] = None

        self.stats = {
            'lines_read': 0,
            'records_accepted': 0,
            'lines_skipped': 0
        }
        # Debug mode - set to True to log every accepted record
        self.debug_mode = False

    def has_next(self) -> bool:
        """Procura a próxima linha válida, descartando as mal formatadas."""
        self.line = None
        for raw_line in self.lines:
            self.stats['lines_read'] += 1
            line = raw_line[:-1] if raw_line.endswith('\n') else raw_line
            # Remove o '\r' final de arquivos no formato DOS
            if line.endswith('\r'):
                line = line[:-1]

            if self.format.fullmatch(line):
                self.line = line
                return True

            self.stats['lines_skipped'] += 1
            logger.warning(f"Skipping mal-formatted data line : {line}")
        return False

    def get_next(self) -> TradeRecord:
        """Converte a linha validada pelo último has_next() em um TradeRecord."""
        if self.line is None:
            raise RuntimeError("get_next() chamado sem um has_next() positivo")

        fields = self.line.split(',')
        self.line = None

        record = TradeRecord(
            timestamp=int(fields[0]),
            instrument=fields[1],
            quantity=float(fields[2]),
            price=float(fields[3])
        )
        self.stats['records_accepted'] += 1

        if self.debug_mode:
            logger.debug(f"Registro lido: {record}")
        return record

    def get_stats(self) -> Dict[str, int]:
        """Retorna contadores de leitura."""
        return self.stats.copy()

    def enable_debug(self, enabled: bool = True):
        """Ativa ou desativa o modo debug para log dos registros lidos."""
        self.debug_mode = enabled
        if enabled:
            logger.info("Modo debug ativado no CsvTradeReader")
        else:
            logger.info("Modo debug desativado no CsvTradeReader")
