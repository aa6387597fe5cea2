# src/atlas_config/core/merge.py
"""
Utilitário canônico de deep-merge de árvores de configuração.

Este módulo implementa a política oficial de deep-merge utilizada pelo
Atlas Config para combinar duas árvores de configuração, onde a segunda
(override) tem precedência sobre a primeira (base).

Política de merge (v1):
    - map + map      → merge recursivo por chave
    - qualquer outro → substituição total pelo override
      (listas, escalares, Unit e conflitos map vs não-map)

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O merge é total: qualquer par de árvores produz um resultado

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves presentes em apenas um dos lados são preservadas
    - O resultado não compartilha nós mutáveis com os inputs

Limites explícitos:
    - Não carrega fontes de configuração
    - Não valida schema
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict

from .tree import is_map


def deep_merge(base: Any, override: Any) -> Any:
    """
    Realiza um deep-merge right-biased entre duas árvores de configuração.

    Quando ambos os lados são mapas, produz um novo dicionário contendo
    a união das chaves: chaves comuns são mescladas recursivamente, chaves
    exclusivas de qualquer lado são copiadas sem alteração. Em qualquer
    outra combinação de formas, o override substitui a base por inteiro.

    Decisões arquiteturais:
        - Apenas pares map/map são mesclados; nenhuma heurística para listas
        - Conflito de forma não é erro: o override sempre vence
        - A ordem das chaves da base é preservada; chaves novas vêm depois

    Invariantes:
        - A estrutura retornada é sempre uma cópia nova
        - `deep_merge(x, deepcopy(x)) == x` para qualquer árvore `x`
        - Nenhuma exceção é levantada

    Limites explícitos:
        - Não resolve referências nem ciclos
        - Não distingue tipos de chave além da igualdade de mapeamento

    Args:
        base (Any): Árvore base (lado esquerdo).
        override (Any): Árvore de override (lado direito).

    Returns:
        Any: Nova árvore resultante do deep-merge.
    """

    if not (is_map(base) and is_map(override)):
        return deepcopy(override)

    result: Dict[Any, Any] = {}

    for key, base_value in base.items():
        if key in override:
            # map + map -> recursão; demais formas -> override vence
            result[key] = deep_merge(base_value, override[key])
        else:
            result[key] = deepcopy(base_value)

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)

    return result
