# src/atlas_config/core/builder.py
"""
Agregação sequencial de fontes de configuração.

Este módulo define o `ConfigBuilder`, responsável por registrar fontes
em ordem e produzir uma única `Config` mesclando-as da primeira para a
última.

Política de agregação (v1):
    - A construção parte de uma árvore Unit (`None`)
    - Cada fonte é mesclada como override sobre o acumulado
    - Fontes posteriores vencem em chaves sobrepostas
    - Chaves não sobrepostas de todas as fontes se acumulam
    - Fontes que devolvem `MISSING` (opcionais ausentes) são ignoradas

Invariantes:
    - A ordem de registro é preservada explicitamente
    - Uma falha de leitura em qualquer fonte aborta `build()` inteiro

Limites explícitos:
    - Não observa mudanças em arquivos
    - Não mantém cache entre chamadas de `build()`
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from .config import Config
from .sources import ConfigSource, FileConfigSource, StringConfigSource, ValueConfigSource
from .tree import MISSING

logger = logging.getLogger(__name__)


class ConfigBuilder:
    """
    Builder encadeável de configuração a partir de múltiplas fontes.

    Exemplo:
        config = (
            ConfigBuilder()
            .file("config.defaults.yaml")
            .file("config.local.yaml", optional=True)
            .string("server: {port: 9000}")
            .build()
        )
    """

    def __init__(self, *, lenient: bool = False) -> None:
        self.lenient = lenient
        self._sources: List[ConfigSource] = []

    def add_source(self, source: ConfigSource) -> "ConfigBuilder":
        if not isinstance(source, ConfigSource):
            raise TypeError(f"Fonte deve implementar get_value(), recebido: {type(source).__name__}")
        self._sources.append(source)
        return self

    def file(
        self,
        path: Union[str, Path],
        *,
        format: Optional[str] = None,
        optional: bool = False,
    ) -> "ConfigBuilder":
        return self.add_source(FileConfigSource(Path(path), format=format, optional=optional))

    def string(self, text: str, *, format: str = "yaml") -> "ConfigBuilder":
        return self.add_source(StringConfigSource(text, format=format))

    def value(self, tree: Any) -> "ConfigBuilder":
        return self.add_source(ValueConfigSource(tree))

    @property
    def sources(self) -> Tuple[ConfigSource, ...]:
        return tuple(self._sources)

    def build(self) -> Config:
        config = Config(None, lenient=self.lenient)

        for source in self._sources:
            value = source.get_value()
            if value is MISSING:
                continue
            config.merge(Config.from_value(value))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "configuração construída a partir de %d fonte(s), hash=%s",
                len(self._sources),
                config.fingerprint(),
            )
        return config
