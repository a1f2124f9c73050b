# src/commented_config/core/section/accessors.py
"""
Accessors tipados da árvore de seções.

Todo accessor segue o mesmo contrato:

    1. resolver o caminho via `get_section`
    2. caminho ausente → default (explícito ou valor zero do tipo)
    3. converter o primeiro valor do nó para o tipo pedido
    4. falha de conversão (texto malformado, nó sem valores) → default

A resolução é concentrada em `lookup`, que devolve um `Lookup` indicando
se o valor veio do documento ou do default. Os getters expõem apenas o
valor.

Política de conversão (v1):
    - int / short → sinal opcional e dígitos, dentro da faixa de 32 / 16 bits
    - bool → verdadeiro sse o texto for "true" (sem diferenciar caixa)
    - double → `float`
    - float → `float` arredondado para precisão simples
    - decimal → `Decimal` finito
    - string → texto do primeiro valor
    - string list → textos de todos os valores

Limites explícitos:
    - Exceções de conversão nunca são propagadas ao chamador
    - Não registra eventos
"""

from __future__ import annotations

import re
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from .tree import Section

T = TypeVar("T")

INT_RANGE = (-(2 ** 31), 2 ** 31 - 1)
SHORT_RANGE = (-(2 ** 15), 2 ** 15 - 1)

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Resultado de uma resolução tipada: o valor e se ele veio do default."""

    value: T
    defaulted: bool


def _parse_bounded(text: str, bounds: tuple) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"Inteiro inválido: {text!r}")
    number = int(text)
    low, high = bounds
    if not low <= number <= high:
        raise ValueError(f"Inteiro fora da faixa [{low}, {high}]: {number}")
    return number


def parse_int(text: str) -> int:
    return _parse_bounded(text, INT_RANGE)


def parse_short(text: str) -> int:
    return _parse_bounded(text, SHORT_RANGE)


def parse_bool(text: str) -> bool:
    return text.strip().lower() == "true"


def parse_double(text: str) -> float:
    return float(text)


def parse_float(text: str) -> float:
    # OverflowError quando excede a faixa de precisão simples
    return struct.unpack("f", struct.pack("f", float(text)))[0]


def parse_decimal(text: str) -> Decimal:
    number = Decimal(text.strip())
    if not number.is_finite():
        raise ValueError(f"Decimal não finito: {text!r}")
    return number


def parse_string(text: str) -> str:
    return text


class TypedAccessors(ABC):
    """
    Base de leitura tipada sobre `get_section`.

    A classe concreta (`Section`) fornece `get_section(path)`.
    """

    @abstractmethod
    def get_section(self, path: str) -> Optional["Section"]:
        """Resolve o caminho relativo a esta seção."""
        raise NotImplementedError

    def lookup(self, path: str, parse: Callable[[str], T], default: T) -> Lookup[T]:
        section = self.get_section(path)
        if section is None or section.base_node is None:
            return Lookup(default, True)

        values = section.base_node.values
        if not values:
            return Lookup(default, True)

        try:
            return Lookup(parse(values[0].text), False)
        except (ValueError, ArithmeticError):
            return Lookup(default, True)

    def is_configuration_section(self, path: str) -> bool:
        """True sse o caminho existe e seu nó não possui valores (container puro)."""
        section = self.get_section(path)
        if section is None or section.base_node is None:
            return False
        return not section.base_node.values

    # -----------------------------
    # Getters
    # -----------------------------
    def get_int(self, path: str, default: int = 0) -> int:
        return self.lookup(path, parse_int, default).value

    def get_short(self, path: str, default: int = 0) -> int:
        return self.lookup(path, parse_short, default).value

    def get_bool(self, path: str, default: bool = False) -> bool:
        return self.lookup(path, parse_bool, default).value

    def get_double(self, path: str, default: float = 0.0) -> float:
        return self.lookup(path, parse_double, default).value

    def get_float(self, path: str, default: float = 0.0) -> float:
        return self.lookup(path, parse_float, default).value

    def get_decimal(self, path: str, default: Decimal = Decimal(0)) -> Decimal:
        return self.lookup(path, parse_decimal, default).value

    def get_string(self, path: str, default: str = "") -> str:
        return self.lookup(path, parse_string, default).value

    def get_string_list(self, path: str, default: Optional[List[str]] = None) -> List[str]:
        """Retorna todos os valores do nó como texto (não apenas o primeiro)."""
        section = self.get_section(path)
        if section is None or section.base_node is None:
            return list(default) if default is not None else []
        return [value.text for value in section.base_node.values]


__all__ = [
    "Lookup",
    "TypedAccessors",
    "parse_int",
    "parse_short",
    "parse_bool",
    "parse_double",
    "parse_float",
    "parse_decimal",
    "parse_string",
]
