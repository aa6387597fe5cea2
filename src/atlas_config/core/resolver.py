# src/atlas_config/core/resolver.py
"""
Resolução de caminhos pontuados sobre árvores de configuração.

Este módulo implementa a descida recursiva que, dado um `ConfigPath`,
localiza a sub-árvore correspondente dentro de uma árvore de configuração.

Política de resolução (v1):
    - A raiz precisa ser um mapa; caso contrário nada é encontrado,
      exceto para o caminho raiz, que devolve a própria raiz
    - Cada segmento casa apenas com chaves `str` iguais a ele
    - Encontrar um nó não-mapa com segmentos restantes → nada encontrado

Segmento sem correspondência:
    - modo estrito (padrão): nada encontrado; segmentos vazios são ignorados
    - modo leniente: a descida para e o nó alcançado até ali é devolvido

Invariantes:
    - A árvore nunca é mutada
    - O valor devolvido é uma referência para dentro da árvore
    - "Nada encontrado" é sempre `MISSING`, nunca `None` (Unit é um valor)

Limites explícitos:
    - Não decodifica tipos
    - Não copia a sub-árvore encontrada
"""

from __future__ import annotations

from typing import Any, Tuple

from .path import ConfigPath, PathLike
from .tree import MISSING, is_map


def resolve(tree: Any, path: PathLike, *, lenient: bool = False) -> Any:
    """
    Localiza a sub-árvore indicada por `path`.

    Decisões arquiteturais:
        - O modo estrito é o padrão: um segmento inexistente nunca
          devolve um nó intermediário silenciosamente
        - No modo leniente, um segmento sem correspondência interrompe
          a descida e devolve o nó alcançado
        - Em ambos os modos, atravessar um escalar ou sequência falha

    Args:
        tree (Any): Árvore de configuração.
        path (PathLike): Caminho pontuado, sequência de segmentos ou `ConfigPath`.
        lenient (bool): Habilita o fallback para o nó parcialmente resolvido.

    Returns:
        Any: Sub-árvore encontrada ou `MISSING`.

    Raises:
        TypeError: Se `path` não for uma forma de caminho aceita.
    """
    path = ConfigPath.of(path)

    if not is_map(tree):
        return tree if path.is_root else MISSING

    return _descend(tree, path.segments, lenient)


def _descend(node: Any, remaining: Tuple[str, ...], lenient: bool) -> Any:
    if not remaining:
        return node

    segment, rest = remaining[0], remaining[1:]

    if segment == "" and not lenient:
        return _descend(node, rest, lenient)

    if not is_map(node):
        return MISSING

    if segment in node:
        return _descend(node[segment], rest, lenient)

    return node if lenient else MISSING
