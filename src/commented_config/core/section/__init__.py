# src/commented_config/core/section/__init__.py
"""
Árvore de seções do Commented Config.

Reúne a estrutura recursiva `Section` (resolução de caminhos, criação,
inserção posicional, achatamento e reconstrução) e a camada de
accessors tipados sobre ela.
"""

from .accessors import Lookup, TypedAccessors
from .tree import Section

__all__ = ["Section", "Lookup", "TypedAccessors"]
