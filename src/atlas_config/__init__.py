# src/atlas_config/__init__.py
"""
Atlas Config: configuração em camadas com deep-merge e consulta tipada.

Este pacote raiz define o namespace público do Atlas Config: carregamento
de uma ou mais fontes (YAML/JSON, arquivo ou string), deep-merge
determinístico entre elas e extração tipada de sub-árvores por caminho
pontuado.

Arquitetura em alto nível:
    - core.merge    → deep-merge right-biased
    - core.resolver → resolução de caminhos pontuados
    - core.config   → fachada `Config`
    - core.builder  → agregação sequencial de fontes

Limites explícitos:
    - Não valida schema
    - Não observa arquivos nem recarrega configuração
"""
from .core.builder import ConfigBuilder
from .core.config import Config
from .core.errors import (
    ConfigDecodeError,
    ConfigError,
    ConfigParseError,
    ConfigPathNotFoundError,
    ConfigSourceError,
    ConfigSourceNotFoundError,
    DefaultsNotFoundError,
    UnsupportedConfigFormatError,
)
from .core.hashing import compute_config_hash
from .core.loader import load_config
from .core.merge import deep_merge
from .core.path import ConfigPath
from .core.resolver import resolve
from .core.sources import (
    ConfigSource,
    FileConfigSource,
    StringConfigSource,
    ValueConfigSource,
)
from .core.tree import MISSING, TreeShape, shape_of

__all__ = [
    "Config",
    "ConfigBuilder",
    "ConfigPath",
    "ConfigSource",
    "FileConfigSource",
    "StringConfigSource",
    "ValueConfigSource",
    "load_config",
    "deep_merge",
    "resolve",
    "compute_config_hash",
    "MISSING",
    "TreeShape",
    "shape_of",
    "ConfigError",
    "ConfigSourceError",
    "ConfigSourceNotFoundError",
    "DefaultsNotFoundError",
    "UnsupportedConfigFormatError",
    "ConfigParseError",
    "ConfigPathNotFoundError",
    "ConfigDecodeError",
]
