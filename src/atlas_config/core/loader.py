# src/atlas_config/core/loader.py
"""
Loader canônico de configuração em camadas (defaults + local).

Este módulo resolve o caso de uso mais comum do Atlas Config: um arquivo
de defaults versionado e um arquivo local opcional de overrides.

Responsabilidades do módulo:
    - Exigir a presença do arquivo de defaults
    - Tolerar a ausência do arquivo local
    - Garantir precedência do override local sobre defaults

Invariantes:
    - O arquivo de defaults é obrigatório
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não valida schema
    - Não persiste configuração ou hash
"""

from pathlib import Path
from typing import Optional
import logging

from .builder import ConfigBuilder
from .config import Config
from .errors import DefaultsNotFoundError

logger = logging.getLogger(__name__)


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    lenient: bool = False,
) -> Config:
    """
    Carrega e resolve a configuração efetiva a partir de defaults + local.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e ignorado quando ausente
        - Quando presente, o local sempre tem prioridade sobre defaults
        - A resolução utiliza o deep-merge right-biased do `ConfigBuilder`

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.
        lenient (bool): Política de resolução de caminhos da `Config` gerada.

    Returns:
        Config: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato de algum arquivo não for suportado.
        ConfigParseError: Se algum arquivo não puder ser parseado.
    """

    defaults_file = Path(defaults_path)
    if not defaults_file.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    builder = ConfigBuilder(lenient=lenient).file(defaults_file)

    if local_path is not None:
        builder.file(local_path, optional=True)

    config = builder.build()
    logger.debug("configuração carregada: defaults=%s local=%s", defaults_file, local_path)
    return config
