"""
Módulo de apresentadores da tabela de agregados.
Cada apresentador converte o snapshot do engine em um formato de saída.
"""

from .tabular_presenter import TabularPresenter
from .registry import PresenterRegistry, create_default_registry

__all__ = ['TabularPresenter', 'PresenterRegistry', 'create_default_registry']
