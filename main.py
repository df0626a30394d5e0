# main.py
import logging
import sys
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from config import settings

console = Console(stderr=True)

logger = logging.getLogger(__name__)

# Logger do leitor, por onde saem os avisos de linhas descartadas
DIAGNOSTICS_LOGGER = "infrastructure.data_sources.csv_trade_reader"

# --- CONFIGURAÇÃO DE LOGGING ---
def configure_logging(log_dir: Optional[str] = None, level: Optional[str] = None):
    """Configura o logger raiz com arquivo de log e saída Rich no console."""
    log_level = getattr(logging, str(level or settings.SYSTEM_CONFIG.get('log_level', 'INFO')).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    if settings.SYSTEM_CONFIG.get('log_to_file', True):
        log_path = Path(log_dir or settings.SYSTEM_CONFIG.get('log_dir', 'logs'))
        log_path.mkdir(parents=True, exist_ok=True)

        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler = logging.FileHandler(log_path / "system.log", mode='w', encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    # Linhas descartadas: uma linha por registro, sem prefixo nem quebra
    diagnostics_handler = logging.StreamHandler(sys.stderr)
    diagnostics_handler.setLevel(logging.WARNING)
    diagnostics_handler.setFormatter(logging.Formatter('%(message)s'))
    diagnostics_handler.addFilter(lambda record: record.name == DIAGNOSTICS_LOGGER)
    root_logger.addHandler(diagnostics_handler)

    # Demais avisos e erros aparecem no console (stderr)
    rich_handler = RichHandler(
        console=console,
        level=logging.WARNING,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    rich_handler.addFilter(lambda record: record.name != DIAGNOSTICS_LOGGER)
    root_logger.addHandler(rich_handler)

    sys.excepthook = handle_uncaught_exception

def handle_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical("EXCEÇÃO NÃO TRATADA", exc_info=(exc_type, exc_value, exc_traceback))

def print_usage(prog: str):
    console.print(f"Usage: {prog} <input_file> <output_file>", markup=False, highlight=False)

def run(input_file: str, output_file: str) -> int:
    """Abre os arquivos, processa a entrada e grava a saída."""
    # Imports do sistema
    from infrastructure.data_sources.csv_trade_reader import CsvTradeReader
    from application.services.aggregation_engine import AggregationEngine
    from presentation.presenters import create_default_registry
    from orchestration.trade_manager import TradeManager

    encoding = settings.PARSER_CONFIG.get('encoding', 'utf-8')
    decode_errors = settings.PARSER_CONFIG.get('decode_errors', 'replace')
    presenter_name = settings.PRESENTATION_CONFIG.get('presenter', 'tabular')

    try:
        # Sem tradução de fim de linha: o leitor remove o '\r' de arquivos DOS.
        # Bytes inválidos chegam ao leitor substituídos e a linha é descartada.
        input_stream = open(input_file, 'r', encoding=encoding, errors=decode_errors, newline='\n')
    except OSError as e:
        logger.error(f"Falha ao abrir arquivo de entrada {input_file}: {e}")
        console.print(f"[bold red]Failed to open file: {escape(input_file)}[/bold red]")
        return 1

    with input_stream:
        try:
            output_stream = open(output_file, 'w', encoding='utf-8', newline='')
        except OSError as e:
            logger.error(f"Falha ao abrir arquivo de saída {output_file}: {e}")
            console.print(f"[bold red]Failed to open output file: {escape(output_file)}[/bold red]")
            return 1

        with output_stream:
            registry = create_default_registry()
            engine = AggregationEngine()
            engine.set_presenter(registry.require_presenter(presenter_name))

            manager = TradeManager(
                source=CsvTradeReader(input_stream),
                engine=engine,
                console=console
            )
            summary = manager.run(output_stream)

    manager.print_summary(summary)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    """Ponto de entrada do sistema."""
    argv = list(sys.argv if argv is None else argv)
    prog = argv[0] if argv else "trade-manager"

    if len(argv) != 3:
        print_usage(prog)
        return 1

    configure_logging()

    try:
        return run(argv[1], argv[2])
    except KeyboardInterrupt:
        console.print("\n[bold]Processamento interrompido pelo usuário.[/bold]")
        return 1
    except Exception as e:
        logger.critical(f"Erro fatal não capturado no main: {e}", exc_info=True)
        console.print("[bold red]💥 Erro fatal. Verifique 'system.log'[/bold red]")
        return 1
    finally:
        for handler in logging.getLogger().handlers:
            handler.flush()

if __name__ == "__main__":
    sys.exit(main())
