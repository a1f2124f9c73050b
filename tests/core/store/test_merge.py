# tests/core/store/test_merge.py
"""
Testes da política de merge com defaults.

Este módulo valida `merge_defaults`, responsável por reconciliar a
sequência de nós do usuário com a sequência de nós de defaults.

Os testes asseguram que:
- o resultado tem exatamente uma entrada por caminho de defaults, na ordem de defaults
- onde o caminho coincide, a entrada é o nó do usuário
- caminhos exclusivos do usuário nunca aparecem no resultado
- nenhum input é mutado

Decisões arquiteturais:
    - Defaults ditam a forma; o usuário fornece apenas valores para caminhos conhecidos
    - A correspondência é por igualdade de caminho

Limites explícitos:
    - Não valida leitura de arquivos
    - Não valida o Document Store
"""

import pytest

try:
    from commented_config.core.store.merge import dropped_paths, merge_defaults
except Exception as e:  # noqa: BLE001
    merge_defaults = None
    dropped_paths = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge API. Implement:"
            "- src/commented_config/core/store/merge.py (merge_defaults, dropped_paths)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_user_value_wins_and_unknown_user_path_is_dropped(make_node):
    """
    Cenário canônico: defaults ["x.y" = "default"], usuário
    ["x.y" = "custom", "x.z" = "extra"]. O resultado contém
    x.y = "custom" e não contém x.z.
    """
    _require_imports()
    defaults = [make_node("x"), make_node("x.y", "default")]
    user = [make_node("x"), make_node("x.y", "custom"), make_node("x.z", "extra")]

    merged = merge_defaults(user, defaults)

    assert [n.path for n in merged] == ["x", "x.y"]
    assert merged[1] is user[1]
    assert merged[1].values[0].text == "custom"
    assert dropped_paths(user, defaults) == ["x.z"]


def test_merge_follows_defaults_order_and_completeness(make_node):
    """
    O resultado segue a ordem dos defaults, com uma entrada por caminho,
    mesmo quando o usuário declara os caminhos em outra ordem.
    """
    _require_imports()
    defaults = [make_node("a", "1"), make_node("b", "2"), make_node("c", "3"), make_node("d", "4")]
    user = [make_node("d", "40"), make_node("extra", "0"), make_node("b", "20")]

    merged = merge_defaults(user, defaults)

    assert [n.path for n in merged] == ["a", "b", "c", "d"]
    assert [n.values[0].text for n in merged] == ["1", "20", "3", "40"]
    assert merged[0] is defaults[0]
    assert merged[2] is defaults[2]


def test_merge_does_not_mutate_inputs(make_node):
    _require_imports()
    defaults = [make_node("a", "1"), make_node("b", "2")]
    user = [make_node("b", "9")]
    defaults_before = list(defaults)
    user_before = list(user)

    merge_defaults(user, defaults)

    assert defaults == defaults_before
    assert user == user_before
    assert defaults[1].values[0].text == "2"


def test_merge_first_duplicate_user_node_wins(make_node):
    _require_imports()
    first = make_node("a", "first")
    merged = merge_defaults([first, make_node("a", "second")], [make_node("a", "default")])

    assert merged == [first]
    assert merged[0] is first


def test_merge_with_empty_inputs(make_node):
    _require_imports()
    defaults = [make_node("a", "1")]

    assert merge_defaults([], defaults) == defaults
    assert merge_defaults(defaults, []) == []
    assert dropped_paths(defaults, []) == ["a"]
