# src/atlas_config/core/decode.py
"""Decodificação tipada de sub-árvores de configuração.

Isola a capacidade genérica "árvore → tipo T" atrás de uma função,
mantendo merge e resolução independentes da biblioteca de validação.

Notas:
- A decodificação usa `pydantic.TypeAdapter`, em modo padrão (lax).
  O modo lax converte escalares textuais: `"8080"` → `8080` para `int`
  e `"yes"` → `True` para `bool`. O modo estrito não é usado porque
  rejeitaria sequências YAML (listas) para alvos `Tuple`.
- Alvos aceitos: builtins, genéricos de `typing`, dataclasses,
  `TypedDict` e modelos pydantic.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import ConfigDecodeError

T = TypeVar("T")


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def decode_value(tree: Any, target: Type[T]) -> T:
    """Decodifica `tree` para `target`.

    Raises:
        ConfigDecodeError: se a árvore não for compatível com o tipo alvo.
    """
    try:
        return TypeAdapter(target).validate_python(tree)
    except ValidationError as e:
        raise ConfigDecodeError(
            f"Valor não decodifica para {_type_name(target)}: "
            f"{e.error_count()} erro(s) de validação"
        ) from e
