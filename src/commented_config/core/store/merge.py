# src/commented_config/core/store/merge.py
"""
Política canônica de merge com defaults.

Este módulo implementa a reconciliação entre a sequência de nós do
documento do usuário e a sequência de nós do documento de defaults.

Política de merge (v1):
    - o documento de defaults dita a forma (caminhos) e a ordem
    - para cada nó de defaults, o nó do usuário com o mesmo caminho
      o substitui (valor e formatação do usuário)
    - nós de defaults sem correspondente entram como estão
    - caminhos presentes apenas no documento do usuário são descartados

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - A correspondência é por igualdade de caminho

Invariantes:
    - O resultado possui exatamente uma entrada por nó de defaults, na ordem de defaults
    - Para caminhos duplicados no documento do usuário, vale o primeiro

Limites explícitos:
    - Não carrega arquivos
    - Não realiza coerção de tipos
    - Não combina valores elemento a elemento
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..document.node import Node


def merge_defaults(user_nodes: Sequence[Node], default_nodes: Sequence[Node]) -> List[Node]:
    """
    Produz a sequência mesclada a partir dos defaults e do documento do usuário.

    Args:
        user_nodes (Sequence[Node]): Nós do documento do usuário.
        default_nodes (Sequence[Node]): Nós do documento de defaults.

    Returns:
        List[Node]: Nova lista na ordem de defaults, com os nós do usuário
        onde o caminho coincide.
    """
    by_path: Dict[str, Node] = {}
    for node in user_nodes:
        by_path.setdefault(node.path, node)

    return [by_path.get(default.path, default) for default in default_nodes]


def dropped_paths(user_nodes: Sequence[Node], default_nodes: Sequence[Node]) -> List[str]:
    """Caminhos do usuário ausentes nos defaults (descartados pelo merge), em ordem."""
    known = {node.path for node in default_nodes}
    return list(dict.fromkeys(node.path for node in user_nodes if node.path not in known))


__all__ = ["merge_defaults", "dropped_paths"]
