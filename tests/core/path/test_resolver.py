# tests/core/path/test_resolver.py
"""
Testes da resolução de caminhos pontuados.

Os testes asseguram que:
- a descida por segmentos encontra sub-árvores em qualquer profundidade
- uma raiz não-mapa não resolve caminhos nomeados
- o modo estrito devolve `MISSING` para segmentos sem correspondência
- o modo leniente devolve o nó alcançado até o segmento sem correspondência
- a árvore nunca é mutada
"""

from copy import deepcopy

import pytest

from atlas_config.core.resolver import resolve
from atlas_config.core.tree import MISSING


def test_resolve_depth(nested_tree):
    assert resolve(nested_tree, "foo.t") == 1
    assert resolve(nested_tree, "foo") == {"t": 1}
    assert resolve(nested_tree, "missing") is MISSING


def test_resolve_returns_reference_into_tree(nested_tree):
    assert resolve(nested_tree, "foo") is nested_tree["foo"]


def test_resolve_segment_sequence(nested_tree):
    assert resolve(nested_tree, ["foo", "t"]) == 1


def test_resolve_unit_value_is_not_missing():
    assert resolve({"a": None}, "a") is None


@pytest.mark.parametrize("path", [".", "", ()])
def test_root_path_returns_root(nested_tree, path):
    assert resolve(nested_tree, path) is nested_tree
    assert resolve(nested_tree, path, lenient=True) is nested_tree


def test_strict_skips_empty_segments(nested_tree):
    assert resolve(nested_tree, "foo..t") == 1
    assert resolve(nested_tree, ".foo.t") == 1


@pytest.mark.parametrize("root", [None, 1, "text", [1, 2]])
def test_non_map_root_is_not_found(root):
    assert resolve(root, "foo") is MISSING
    assert resolve(root, "foo", lenient=True) is MISSING


def test_non_map_root_with_root_path_returns_root():
    assert resolve([1, 2], ".") == [1, 2]


def test_descending_through_scalar_is_not_found(nested_tree):
    assert resolve(nested_tree, "foo.t.deeper") is MISSING
    assert resolve(nested_tree, "foo.t.deeper", lenient=True) is MISSING


def test_descending_through_sequence_is_not_found():
    assert resolve({"items": [{"a": 1}]}, "items.0") is MISSING


def test_only_string_keys_match():
    tree = {1: "int key", "1": "str key"}
    assert resolve(tree, "1") == "str key"
    assert resolve({1: "int key"}, "1") is MISSING


def test_strict_mid_path_miss_is_not_found(nested_tree):
    assert resolve(nested_tree, "foo.missing") is MISSING


def test_lenient_mid_path_miss_returns_partial_subtree(nested_tree):
    """
    Verifica o fallback leniente: um segmento sem correspondência interrompe
    a descida e devolve o nó alcançado até ali.
    """
    assert resolve(nested_tree, "foo.missing", lenient=True) == {"t": 1}
    assert resolve(nested_tree, "foo.missing.t", lenient=True) == {"t": 1}
    assert resolve(nested_tree, "missing", lenient=True) is nested_tree


def test_lenient_empty_segment_stops_descent(nested_tree):
    assert resolve(nested_tree, "foo..t", lenient=True) == {"t": 1}


def test_resolve_never_mutates(nested_tree):
    snapshot = deepcopy(nested_tree)
    resolve(nested_tree, "foo.t")
    resolve(nested_tree, "foo.missing", lenient=True)
    assert nested_tree == snapshot


def test_invalid_path_type_raises(nested_tree):
    with pytest.raises(TypeError):
        resolve(nested_tree, 3)
