# src/atlas_config/core/tree.py
"""
Modelo genérico de árvore de valores do Atlas Config.

Uma árvore de configuração é composta apenas por valores Python simples,
tal como produzidos por PyYAML ou `json`:

    - Unit      → `None`
    - Map       → qualquer `Mapping` (resultados de merge são `dict`)
    - Sequence  → `list` ou `tuple`
    - Scalar    → todo o resto (`str`, `int`, `float`, `bool`, datas...)

Invariantes:
    - A árvore não possui ciclos
    - `str` e `bytes` são escalares, nunca sequências

Limites explícitos:
    - Não parseia texto (responsabilidade de `sources`)
    - Não valida schema
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class TreeShape(str, Enum):
    """
    Forma de um nó da árvore de configuração.

    O valor textual do enum é estável e pode ser usado em mensagens
    de log e de erro.
    """

    UNIT = "unit"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAP = "map"


class _Missing:
    """Sentinela de "nada encontrado", distinta de `None` (Unit)."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def shape_of(value: Any) -> TreeShape:
    if value is None:
        return TreeShape.UNIT
    if isinstance(value, Mapping):
        return TreeShape.MAP
    if isinstance(value, (list, tuple)):
        return TreeShape.SEQUENCE
    return TreeShape.SCALAR


def is_map(value: Any) -> bool:
    return isinstance(value, Mapping)
