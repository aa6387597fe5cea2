# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Config.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdo YAML de defaults e de overrides locais
- árvores de configuração já materializadas

Decisões arquiteturais:
    - Conteúdo é fornecido como string; testes que precisam de arquivo
      escrevem em `tmp_path`
    - Dados retornados são determinísticos e isolados

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Loader / Builder fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de defaults semelhante ao uso real.

    Representa o conteúdo típico de um arquivo `config.defaults.yaml`,
    base canônica sobre a qual overrides locais são aplicados via deep-merge.

    Invariantes:
        - YAML sintaticamente válido
        - Contém mapas aninhados, escalares e uma lista

    Returns:
        str: Conteúdo YAML representando configuração padrão (defaults).
    """

    return """\
server:
  host: 0.0.0.0
  port: 8080
  workers: 4
logging:
  level: INFO
features:
  - auth
  - metrics
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    Fixture que fornece um YAML de override local.

    Sobrescreve um escalar aninhado, substitui a lista inteira e
    adiciona uma seção inexistente nos defaults.

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """

    return """\
server:
  port: 9000
logging:
  level: DEBUG
features:
  - auth
database:
  url: sqlite:///local.db
"""


# =====================================================
# Tree fixtures
# =====================================================

@pytest.fixture
def nested_tree() -> dict:
    """Árvore mínima `{foo: {t: 1}}` usada nos testes de resolução."""
    return {"foo": {"t": 1}}
