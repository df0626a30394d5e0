"""
Configuração do sistema carregada de config.yaml.
"""
