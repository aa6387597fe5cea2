# src/atlas_config/core/hashing.py
"""
Hashing canônico de árvores de configuração.

Este módulo gera um identificador determinístico da configuração
efetiva, útil para rastrear qual combinação de fontes foi utilizada
em uma execução.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Invariantes:
    - Árvores estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não carrega nem mescla configuração
    - Não persiste o hash
"""


import json
import hashlib
from collections.abc import Mapping
from typing import Any


def _canonical_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)


def _canonicalize(node: Any) -> Any:
    if isinstance(node, Mapping):
        return {_canonical_key(k): _canonicalize(v) for k, v in node.items()}
    if isinstance(node, (list, tuple)):
        return [_canonicalize(v) for v in node]
    return node


def compute_config_hash(tree: Any) -> str:
    """
    Gera um hash determinístico de uma árvore de configuração.

    Política de hashing (v1):
        - Chaves de mapa convertidas para str antes da serialização
          (`1`, `true` e `null` seguem a forma JSON; demais tipos via `str`)
        - Serialização JSON canônica
        - Ordenação estável de chaves
        - Separadores compactos (sem espaços supérfluos)
        - Escalares fora do JSON (ex.: datas YAML) serializados via `str`
        - Codificação UTF-8
        - Algoritmo SHA-256

    Decisões arquiteturais:
        - Qualquer forma de árvore é aceita (map, sequência, escalar, Unit)
        - Mapas com chaves de tipos mistos são aceitos
        - Tuplas e listas produzem o mesmo hash
        - Chaves com a mesma forma textual (ex.: `1` e `"1"`) colidem

    Invariantes:
        - O valor retornado é uma string hexadecimal de 64 caracteres
        - Nenhuma mutação ocorre sobre o input
        - Nunca levanta exceção para árvores produzidas pelas fontes

    Args:
        tree (Any): Árvore de configuração.

    Returns:
        str: Hash SHA-256 hexadecimal da árvore.
    """

    canonical_json = json.dumps(
        _canonicalize(tree),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
