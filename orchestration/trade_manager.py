import time
import logging
from typing import Dict, Any, Optional, TextIO
from rich.console import Console

from application.interfaces.trade_source import ITradeSource
from application.services.aggregation_engine import AggregationEngine

# Configuração do logger para este módulo
logger = logging.getLogger(__name__)

class TradeManager:
    """
    Conduz uma execução completa: lê todos os registros da fonte,
    alimenta o engine e, ao esgotar a entrada, apresenta o resultado.
    """

    def __init__(
        self,
        source: ITradeSource,
        engine: AggregationEngine,
        console: Optional[Console] = None
    ):
        self.source = source
        self.engine = engine
        self.console = console or Console(stderr=True)

        self.current_phase = "INITIALIZATION"
        self.phase_start_time = None

    def run(self, sink: TextIO) -> Dict[str, Any]:
        """Processa toda a entrada e escreve a saída no destino."""
        logger.info("--- Processamento de negócios iniciado ---")
        self.current_phase = "INGESTION"
        self.phase_start_time = time.perf_counter()

        for record in self.source:
            self.engine.add_record(record)

        self.current_phase = "PRESENTATION"
        self.engine.present(sink)
        sink.flush()

        self.current_phase = "DONE"
        summary = self.get_summary()
        logger.info(f"--- Processamento concluído: {summary} ---")
        return summary

    def get_summary(self) -> Dict[str, Any]:
        """Combina as estatísticas da fonte e do engine."""
        source_stats = self.source.get_stats()
        engine_stats = self.engine.get_stats()
        elapsed = time.perf_counter() - self.phase_start_time if self.phase_start_time else 0.0

        return {
            'lines_read': source_stats.get('lines_read', 0),
            'records_accepted': engine_stats['records_added'],
            'lines_skipped': source_stats.get('lines_skipped', 0),
            'instruments': engine_stats['instruments'],
            'elapsed_seconds': round(elapsed, 3)
        }

    def print_summary(self, summary: Dict[str, Any]):
        """Exibe as estatísticas finais no console."""
        self.console.print("\n[cyan]📊 Estatísticas do processamento:[/cyan]")
        self.console.print(f"   • Linhas lidas: {summary['lines_read']}")
        self.console.print(f"   • Registros aceitos: {summary['records_accepted']}")
        self.console.print(f"   • Linhas descartadas: {summary['lines_skipped']}")
        self.console.print(f"   • Instrumentos: {summary['instruments']}")
        self.console.print(f"   • Tempo: {summary['elapsed_seconds']:.3f}s")
