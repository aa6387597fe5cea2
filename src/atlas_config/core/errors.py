# src/atlas_config/core/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura de fontes, a consulta por caminho e a decodificação tipada
de valores de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Apenas a leitura de fontes é tratada como falha fatal
    - Merge e resolução de caminho nunca levantam exceções próprias

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Falhas de leitura/parse herdam de `ConfigSourceError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não representa erros de entrada de caminho (esses são `TypeError`)
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falha de fonte e falha de consulta
    """


class ConfigSourceError(ConfigError):
    """
    Exceção base para falhas de leitura ou parse de uma fonte.

    Decisões arquiteturais:
        - Uma fonte inválida aborta a construção inteira da configuração
        - Nenhuma configuração parcial é produzida
    """


class ConfigSourceNotFoundError(ConfigSourceError):
    """Arquivo de configuração não existe no caminho informado."""


class DefaultsNotFoundError(ConfigSourceNotFoundError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório em `load_config`
        - A ausência de defaults invalida a configuração efetiva

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigSourceError):
    """
    Exceção levantada quando o formato da fonte não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class ConfigParseError(ConfigSourceError):
    """Falha ao ler ou parsear o conteúdo YAML/JSON de uma fonte."""


class ConfigPathNotFoundError(ConfigError):
    """Caminho pontuado não resolve para nenhuma sub-árvore."""


class ConfigDecodeError(ConfigError):
    """
    Sub-árvore existe, mas não pode ser decodificada para o tipo pedido.

    O erro original de validação fica disponível em `__cause__`.
    """
