# tests/core/section/test_accessors.py
"""
Testes dos accessors tipados da árvore de seções.

Este módulo valida o contrato único dos getters: resolver o caminho,
converter o primeiro valor e, em qualquer ausência ou falha, retornar o
default informado (ou o valor zero do tipo).

Os testes asseguram que:
- caminhos ausentes retornam o default explícito ou o valor zero
- valores válidos são convertidos para o tipo pedido
- textos malformados, fora de faixa ou nós sem valores retornam o default
- a lista de strings retorna todos os valores
- `lookup` distingue valor presente de valor default

Limites explícitos:
    - Não valida o parser nem o composer
"""

from decimal import Decimal

import pytest

from commented_config.core.section.accessors import Lookup, TypedAccessors, parse_float
from commented_config.core.section.tree import Section

_GETTERS_AND_ZEROS = [
    ("get_int", 0),
    ("get_short", 0),
    ("get_bool", False),
    ("get_double", 0.0),
    ("get_float", 0.0),
    ("get_decimal", Decimal(0)),
    ("get_string", ""),
]


@pytest.fixture
def typed_tree(make_node) -> Section:
    tree = Section()
    tree.decode([
        make_node("n"),
        make_node("n.int", "42"),
        make_node("n.neg", "-7"),
        make_node("n.big", "2147483648"),
        make_node("n.short_big", "40000"),
        make_node("n.float", "0.1"),
        make_node("n.huge", "1e40"),
        make_node("n.bool", "TRUE"),
        make_node("n.yes", "yes"),
        make_node("n.decimal", "12.345"),
        make_node("n.nan", "NaN"),
        make_node("n.text", "hello"),
        make_node("n.list", "a", "b", "c"),
        make_node("n.empty"),
    ])
    return tree


@pytest.mark.parametrize("getter, zero", _GETTERS_AND_ZEROS)
def test_unresolved_path_returns_builtin_zero(typed_tree, getter, zero):
    assert getattr(typed_tree, getter)("n.missing") == zero


@pytest.mark.parametrize(
    "getter, default",
    [
        ("get_int", 11),
        ("get_short", 12),
        ("get_bool", True),
        ("get_double", 1.5),
        ("get_float", 2.5),
        ("get_decimal", Decimal("9.99")),
        ("get_string", "fallback"),
    ],
)
def test_unresolved_path_returns_explicit_default(typed_tree, getter, default):
    assert getattr(typed_tree, getter)("missing.path", default) == default


@pytest.mark.parametrize("getter, zero", _GETTERS_AND_ZEROS)
def test_section_without_values_returns_default(typed_tree, getter, zero):
    assert getattr(typed_tree, getter)("n.empty") == zero


def test_integer_parsing(typed_tree):
    assert typed_tree.get_int("n.int") == 42
    assert typed_tree.get_int("n.neg") == -7
    assert typed_tree.get_short("n.int") == 42


def test_integer_out_of_range_or_malformed_returns_default(typed_tree):
    assert typed_tree.get_int("n.big", -1) == -1
    assert typed_tree.get_short("n.short_big", -1) == -1
    assert typed_tree.get_int("n.float", -1) == -1
    assert typed_tree.get_int("n.text", -1) == -1


def test_boolean_parsing_is_true_only_for_true(typed_tree):
    assert typed_tree.get_bool("n.bool") is True
    assert typed_tree.get_bool("n.yes", True) is False
    assert typed_tree.get_bool("n.text", True) is False


def test_floating_point_parsing(typed_tree):
    assert typed_tree.get_double("n.float") == 0.1
    assert typed_tree.get_double("n.int") == 42.0
    assert typed_tree.get_double("n.text", -1.0) == -1.0


def test_float_is_rounded_to_single_precision(typed_tree):
    value = typed_tree.get_float("n.float")

    assert value == parse_float("0.1")
    assert value != 0.1
    assert value == pytest.approx(0.1)
    assert typed_tree.get_float("n.huge", -1.0) == -1.0


def test_decimal_parsing(typed_tree):
    assert typed_tree.get_decimal("n.decimal") == Decimal("12.345")
    assert typed_tree.get_decimal("n.text", Decimal("1")) == Decimal("1")
    assert typed_tree.get_decimal("n.nan", Decimal("2")) == Decimal("2")


def test_string_returns_first_value(typed_tree):
    assert typed_tree.get_string("n.text") == "hello"
    assert typed_tree.get_string("n.list") == "a"


def test_string_list_returns_all_values(typed_tree):
    assert typed_tree.get_string_list("n.list") == ["a", "b", "c"]
    assert typed_tree.get_string_list("n.text") == ["hello"]
    assert typed_tree.get_string_list("n.empty") == []
    assert typed_tree.get_string_list("n.missing") == []
    assert typed_tree.get_string_list("n.missing", ["x"]) == ["x"]


def test_lookup_distinguishes_present_from_defaulted(typed_tree):
    from commented_config.core.section.accessors import parse_int

    assert typed_tree.lookup("n.int", parse_int, 0) == Lookup(42, False)
    assert typed_tree.lookup("n.text", parse_int, 0) == Lookup(0, True)
    assert typed_tree.lookup("n.missing", parse_int, 5) == Lookup(5, True)


def test_is_configuration_section(typed_tree):
    assert typed_tree.is_configuration_section("n") is True
    assert typed_tree.is_configuration_section("n.empty") is True
    assert typed_tree.is_configuration_section("n.int") is False
    assert typed_tree.is_configuration_section("n.missing") is False


def test_typed_accessors_requires_get_section():
    with pytest.raises(TypeError):
        TypedAccessors()
