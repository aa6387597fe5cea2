# src/atlas_config/core/config.py
"""
Fachada de configuração do Atlas Config.

Este módulo define `Config`, o objeto que detém uma árvore de
configuração e expõe as duas operações centrais sobre ela:

    - extração tipada de uma sub-árvore por caminho pontuado
    - merge de outra configuração sobre a atual

Política de consulta (v1):
    - `try_get` devolve um default quando o caminho não existe OU quando
      o valor não decodifica para o tipo pedido (os dois casos se confundem)
    - `get` separa os dois casos em exceções distintas

Princípios fundamentais:
    - Apenas a leitura de fontes é fatal
    - Merge e consulta degradam para ausência, nunca para erro implícito
    - Valores devolvidos nunca compartilham nós com a árvore interna

Invariantes:
    - Uma `Config` detém exatamente uma árvore
    - A árvore só é substituída por `merge`
    - Em `merge`, `self` é a base e `other` é o override

Limites explícitos:
    - Não valida schema
    - Não sequencia fontes (responsabilidade de `ConfigBuilder`)
"""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

from .decode import decode_value
from .errors import ConfigDecodeError, ConfigPathNotFoundError
from .hashing import compute_config_hash
from .merge import deep_merge
from .path import ConfigPath, PathLike
from .resolver import resolve
from .sources import parse_text, read_file
from .tree import MISSING

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Config:
    """
    Configuração resolvida, consultável por caminho pontuado.

    Decisões arquiteturais:
        - A política de resolução (estrita ou leniente) é fixada na construção
        - A decodificação opera sobre uma cópia da sub-árvore encontrada
        - Igualdade entre configurações compara apenas as árvores

    Invariantes:
        - `merge` nunca altera a configuração recebida como override
        - `to_value()` sempre devolve uma cópia independente

    Limites explícitos:
        - Não é thread-safe para escrita concorrente (`merge`)
        - Não recarrega fontes automaticamente
    """

    def __init__(self, tree: Any = None, *, lenient: bool = False) -> None:
        self._tree = tree
        self.lenient = lenient

    # -----------------------------
    # Construção
    # -----------------------------

    @classmethod
    def from_value(cls, tree: Any, *, lenient: bool = False) -> "Config":
        return cls(tree, lenient=lenient)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        *,
        format: Optional[str] = None,
        lenient: bool = False,
    ) -> "Config":
        return cls(read_file(path, format), lenient=lenient)

    @classmethod
    def from_string(cls, text: str, *, format: str = "yaml", lenient: bool = False) -> "Config":
        return cls(parse_text(text, format), lenient=lenient)

    # -----------------------------
    # Consulta
    # -----------------------------

    def _find(self, path: PathLike) -> Any:
        return resolve(self._tree, path, lenient=self.lenient)

    def contains(self, path: PathLike) -> bool:
        return self._find(path) is not MISSING

    def __contains__(self, path: PathLike) -> bool:
        return self.contains(path)

    def try_get(self, path: PathLike, target: Type[T] = Any, default: Optional[T] = None) -> Optional[T]:
        """
        Extrai e decodifica o valor em `path`, ou devolve `default`.

        Caminho inexistente e valor incompatível com `target` produzem o
        mesmo resultado; use `get` quando a distinção importar.

        Args:
            path (PathLike): Caminho pontuado, sequência de segmentos ou `ConfigPath`.
            target (Type[T]): Tipo alvo da decodificação (padrão: `Any`).
            default (Optional[T]): Valor devolvido quando nada é extraído.

        Returns:
            Optional[T]: Valor decodificado ou `default`.
        """
        node = self._find(path)
        if node is MISSING:
            return default

        try:
            return decode_value(deepcopy(node), target)
        except ConfigDecodeError as e:
            logger.debug("try_get('%s') ignorou falha de decodificação: %s", ConfigPath.of(path), e)
            return default

    def get(self, path: PathLike, target: Type[T] = Any) -> T:
        """
        Extrai e decodifica o valor em `path`, distinguindo as falhas.

        Raises:
            ConfigPathNotFoundError: Se o caminho não resolver.
            ConfigDecodeError: Se o valor não decodificar para `target`.
        """
        path = ConfigPath.of(path)
        node = self._find(path)
        if node is MISSING:
            raise ConfigPathNotFoundError(f"Caminho de configuração não encontrado: '{path}'")
        return decode_value(deepcopy(node), target)

    # -----------------------------
    # Merge
    # -----------------------------

    def merge(self, other: "Config") -> None:
        """
        Mescla `other` sobre esta configuração (deep-merge right-biased).

        Valores de `other` vencem em chaves sobrepostas; chaves exclusivas
        de qualquer lado se acumulam.
        """
        if not isinstance(other, Config):
            raise TypeError(f"merge espera Config, recebido: {type(other).__name__}")
        self._tree = deep_merge(self._tree, other._tree)

    # -----------------------------
    # Inspeção
    # -----------------------------

    def to_value(self) -> Any:
        return deepcopy(self._tree)

    def fingerprint(self) -> str:
        return compute_config_hash(self._tree)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._tree == other._tree

    def __repr__(self) -> str:
        return f"Config({self._tree!r}, lenient={self.lenient})"
