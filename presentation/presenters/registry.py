"""
Registry centralizado de apresentadores.
Permite escolher o formato de saída pelo nome configurado em config.yaml.
"""

from typing import Dict, Any, Optional
import logging

from application.interfaces.data_presenter import Presenter

logger = logging.getLogger(__name__)


class PresenterRegistry:
    """Registry para gerenciar apresentadores por nome."""

    def __init__(self):
        self.presenters: Dict[str, Presenter] = {}
        logger.info("PresenterRegistry inicializado")

    def register_presenter(self, name: str, presenter: Presenter):
        """
        Registra um apresentador sob um nome.

        Args:
            name: Nome usado na configuração
            presenter: Instância de IDataPresenter ou função (sink, table)
        """
        if name in self.presenters:
            logger.warning(
                f"Sobrescrevendo apresentador '{name}'. "
                f"Anterior: {type(self.presenters[name]).__name__}, "
                f"Novo: {type(presenter).__name__}"
            )

        self.presenters[name] = presenter
        logger.info(f"Apresentador {type(presenter).__name__} registrado como '{name}'")

    def get_presenter(self, name: str) -> Optional[Presenter]:
        """Retorna o apresentador registrado sob o nome, se houver."""
        return self.presenters.get(name)

    def require_presenter(self, name: str) -> Presenter:
        """Retorna o apresentador ou levanta KeyError listando os disponíveis."""
        presenter = self.presenters.get(name)
        if presenter is None:
            raise KeyError(
                f"Apresentador '{name}' não registrado. Disponíveis: {sorted(self.presenters)}"
            )
        return presenter

    def get_statistics(self) -> Dict[str, Any]:
        """Retorna estatísticas do registry."""
        return {
            'total_presenters': len(self.presenters),
            'names': sorted(self.presenters),
            'presenter_types': {name: type(p).__name__ for name, p in self.presenters.items()}
        }


def create_default_registry() -> PresenterRegistry:
    """
    Cria o registry padrão com o apresentador tabular.
    """
    from presentation.presenters.tabular_presenter import TabularPresenter

    registry = PresenterRegistry()
    registry.register_presenter("tabular", TabularPresenter())

    logger.info(f"Registry padrão criado: {registry.get_statistics()}")

    return registry
