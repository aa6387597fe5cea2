# src/atlas_config/core/path.py
"""
Caminhos pontuados de configuração.

Este módulo define o `ConfigPath`, a representação canônica de um
caminho de consulta dentro de uma árvore de configuração, decomposto
em uma sequência ordenada de segmentos.

Um caminho pode ser construído a partir de:
    - uma string pontuada (`"server.http.port"`)
    - uma sequência de strings (`["server", "http", "port"]`)
    - outro `ConfigPath`

Princípios fundamentais:
    - Caminhos são imutáveis após construídos
    - A conversão string → caminho → string é exata
    - Nenhuma normalização implícita é aplicada aos segmentos

Invariantes:
    - `segments` é sempre uma tupla de `str`
    - `str(ConfigPath.parse(s)) == s` para qualquer string `s`
    - Um caminho composto apenas por segmentos vazios é o caminho raiz

Limites explícitos:
    - Não resolve caminhos (responsabilidade de `resolver`)
    - Não valida existência de chaves
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Sequence, Tuple, Union

PathLike = Union["ConfigPath", str, Sequence[str]]


@dataclass(frozen=True)
class ConfigPath:
    """
    Caminho imutável composto por segmentos ordenados.

    Decisões arquiteturais:
        - O separador é sempre `.`
        - Segmentos vazios são preservados (ex.: `"."` → `("", "")`),
          cabendo ao resolver decidir como tratá-los
        - Segmentos construídos a partir de sequência podem conter `.`,
          permitindo endereçar chaves literais como `"a.b"`

    Invariantes:
        - Dois caminhos são iguais se e somente se seus segmentos são iguais
        - Instâncias são hashable e seguras para compartilhamento

    Limites explícitos:
        - Não suporta índices de sequência
        - Não realiza escape do separador na conversão para string
    """

    SEPARATOR: ClassVar[str] = "."

    segments: Tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.segments, str):
            raise TypeError(
                "Segmentos não podem ser uma str; use ConfigPath.parse ou ConfigPath.of"
            )
        segments = tuple(self.segments)
        for segment in segments:
            if not isinstance(segment, str):
                raise TypeError(
                    f"Segmentos de caminho devem ser str, recebido: {type(segment).__name__}"
                )
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, text: str) -> "ConfigPath":
        if not isinstance(text, str):
            raise TypeError(f"Caminho pontuado deve ser str, recebido: {type(text).__name__}")
        return cls(tuple(text.split(cls.SEPARATOR)))

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "ConfigPath":
        if isinstance(segments, str):
            raise TypeError(
                "Segmentos não podem ser uma str; use ConfigPath.parse ou ConfigPath.of"
            )
        return cls(tuple(segments))

    @classmethod
    def of(cls, value: PathLike) -> "ConfigPath":
        """
        Converte qualquer forma aceita de caminho em `ConfigPath`.

        Args:
            value: `ConfigPath`, string pontuada ou sequência de strings.

        Returns:
            ConfigPath: Caminho equivalente.

        Raises:
            TypeError: Se `value` não for uma das formas aceitas.
        """
        if isinstance(value, ConfigPath):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (list, tuple)):
            return cls.from_segments(value)
        raise TypeError(
            f"Caminho deve ser ConfigPath, str ou sequência de str, recebido: {type(value).__name__}"
        )

    @property
    def is_root(self) -> bool:
        return all(segment == "" for segment in self.segments)

    def child(self, *segments: str) -> "ConfigPath":
        return ConfigPath(self.segments + tuple(segments))

    def __str__(self) -> str:
        return self.SEPARATOR.join(self.segments)

    def __repr__(self) -> str:
        return f"ConfigPath({str(self)!r})"
