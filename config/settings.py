# config/settings.py
"""Carregador de configurações do YAML."""
import yaml
from pathlib import Path
from typing import Any, Dict, Union

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config.yaml'

# Seções e chaves que o sistema lê sem valor padrão seguro
REQUIRED_KEYS = {
    'parser': ('pattern',),
    'presentation': ('presenter',),
    'system': (),
}

def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Lê o YAML e valida as seções obrigatórias."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Arquivo {config_path} não encontrado!")

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Conteúdo inválido em {config_path}: esperado um mapeamento")

    for section, keys in REQUIRED_KEYS.items():
        values = loaded.get(section)
        if not isinstance(values, dict):
            raise ValueError(f"Seção '{section}' ausente ou inválida em {config_path}")
        missing = [key for key in keys if key not in values]
        if missing:
            raise ValueError(f"Chaves ausentes na seção '{section}' de {config_path}: {missing}")

    return loaded

config = load_config()

# Acesso fácil às seções de configuração
PARSER_CONFIG = config['parser']
PRESENTATION_CONFIG = config['presentation']
SYSTEM_CONFIG = config['system']
