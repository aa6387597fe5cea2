# src/atlas_config/core/sources.py
"""
Fontes de configuração (arquivo, string, valor em memória).

Uma fonte é qualquer objeto capaz de produzir uma árvore de configuração
via `get_value()`. Fontes de arquivo e de string são equivalentes para
o builder: ambas são mescladas da mesma forma, na ordem de registro.

Formatos suportados (v1):
    - YAML (.yaml, .yml)
    - JSON (.json)

Decisões arquiteturais:
    - O formato de arquivos é inferido pela extensão, salvo se explícito
    - Texto vazio (ou só espaços) é interpretado como mapa vazio
    - `null`/`~` explícitos continuam sendo Unit (`None`)
    - Falhas de leitura e parse são fatais e tipadas

Invariantes:
    - `get_value()` nunca devolve estado compartilhado entre chamadas
    - Uma fonte opcional ausente devolve `MISSING`, nunca `None`

Limites explícitos:
    - Não mescla árvores (responsabilidade de `merge`/`builder`)
    - Não realiza retry nem cache
"""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol, Union, runtime_checkable

import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    ConfigSourceError,
    ConfigSourceNotFoundError,
    UnsupportedConfigFormatError,
)
from .tree import MISSING

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = frozenset({"yaml", "json"})

_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


@runtime_checkable
class ConfigSource(Protocol):
    """Protocolo mínimo de uma fonte de configuração."""

    def get_value(self) -> Any:
        ...


def _check_format(fmt: str) -> str:
    normalized = str(fmt).lower()
    if normalized not in SUPPORTED_FORMATS:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {fmt}")
    return normalized


def format_for_path(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in _SUFFIX_FORMATS:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix or path.name}")
    return _SUFFIX_FORMATS[suffix]


def parse_text(text: str, fmt: str = "yaml", *, origin: str = "<string>") -> Any:
    """
    Converte texto YAML/JSON em uma árvore de configuração.

    Args:
        text (str): Conteúdo textual.
        fmt (str): `"yaml"` ou `"json"`.
        origin (str): Identificação da fonte para mensagens de erro.

    Returns:
        Any: Árvore de configuração.

    Raises:
        UnsupportedConfigFormatError: Se `fmt` não for suportado.
        ConfigParseError: Se o conteúdo não puder ser parseado.
    """
    fmt = _check_format(fmt)

    if not text.strip():
        return {}

    try:
        if fmt == "yaml":
            return yaml.safe_load(text)
        return json.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise ConfigParseError(f"Falha ao parsear {fmt} em {origin}: {e}") from e


def read_file(path: Union[str, Path], fmt: Optional[str] = None) -> Any:
    """
    Lê e parseia um arquivo de configuração.

    Raises:
        ConfigSourceNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        ConfigSourceError: Se o arquivo não puder ser lido.
        ConfigParseError: Se o conteúdo não puder ser parseado.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigSourceNotFoundError(f"Arquivo de configuração não encontrado: {p}")

    fmt = _check_format(fmt) if fmt is not None else format_for_path(p)

    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigSourceError(f"Falha ao ler {p}: {e}") from e

    value = parse_text(raw, fmt, origin=str(p))
    logger.debug("fonte lida: %s (%s)", p, fmt)
    return value


@dataclass(frozen=True)
class FileConfigSource:
    """Fonte baseada em arquivo; `optional=True` tolera arquivo ausente."""

    path: Path
    format: Optional[str] = None
    optional: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def get_value(self) -> Any:
        if self.optional and not self.path.exists():
            logger.debug("fonte opcional ausente, ignorada: %s", self.path)
            return MISSING
        return read_file(self.path, self.format)


@dataclass(frozen=True)
class StringConfigSource:
    text: str
    format: str = "yaml"

    def get_value(self) -> Any:
        return parse_text(self.text, self.format)


@dataclass(frozen=True)
class ValueConfigSource:
    """Árvore já materializada em memória."""

    value: Any

    def get_value(self) -> Any:
        return deepcopy(self.value)
