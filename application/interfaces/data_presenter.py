from abc import ABC, abstractmethod
from typing import Callable, TextIO, Union
from domain.entities.aggregate import AggregateTable

class IDataPresenter(ABC):
    """
    Interface para apresentadores da tabela de agregados.
    Novos formatos (JSON, largura fixa, CSV com cabeçalho) implementam
    apenas render().
    """

    @abstractmethod
    def render(self, sink: TextIO, table: AggregateTable) -> None:
        """Escreve a tabela formatada no destino."""

    def __call__(self, sink: TextIO, table: AggregateTable) -> None:
        self.render(sink, table)

# Funções com a mesma assinatura também servem como apresentador
Presenter = Union[IDataPresenter, Callable[[TextIO, AggregateTable], None]]
