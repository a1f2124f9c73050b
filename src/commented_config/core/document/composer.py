# src/commented_config/core/document/composer.py
"""
Composer canônico de nós planos em documento YAML.

Este módulo é o inverso de `parser`: recebe a sequência plana e ordenada
de `Node` produzida pelo achatamento da árvore de seções e a escreve
como texto YAML, na exata ordem recebida.

Política de escrita (v1):
    - comentários coletados acima de cada chave são reescritos antes dela
    - nó sem valores → `chave:`
    - nó com um valor → `chave: valor`
    - nó de lista ou com múltiplos valores → `chave:` seguido de itens `- valor`
    - lista vazia → `chave: []`
    - nó com valores seguido dos próprios filhos → `chave:` (valores descartados)

Decisões arquiteturais:
    - Strings são citadas via `yaml.safe_dump` apenas quando necessário,
      garantindo que o texto relido seja idêntico
    - Demais tags são escritas de forma literal
    - A indentação original é respeitada enquanto produzir YAML válido:
      irmãos reutilizam a indentação do primeiro irmão e filhos ficam
      sempre mais indentados que o pai emitido

Limites explícitos:
    - Não reordena nós
    - Não valida semântica dos valores
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set

import yaml  # PyYAML

from .node import Node, Value
from .settings import DocumentSettings

_DOCUMENT_END = "\n...\n"


def _render_string(text: str) -> str:
    style = '"' if "\n" in text else None
    rendered = yaml.safe_dump(text, default_style=style, allow_unicode=True, width=float("inf"))
    if rendered.endswith(_DOCUMENT_END):
        rendered = rendered[: -len(_DOCUMENT_END)]
    return rendered.rstrip("\n")


def _render_value(value: Value) -> str:
    if value.tag == "str":
        return _render_string(value.text)
    return value.text or "''"


def _parent_paths(nodes: Iterable[Node]) -> Set[str]:
    return {node.path.rpartition(".")[0] for node in nodes}


def shadowed_paths(nodes: Sequence[Node]) -> List[str]:
    """
    Caminhos de nós que possuem valores e também filhos na sequência.

    YAML não representa um escalar com filhos: esses nós são escritos
    como seção e seus valores não chegam ao documento.
    """
    parents = _parent_paths(nodes)
    return [node.path for node in nodes if node.values and node.path in parents]


def _node_lines(node: Node, pad: str, settings: DocumentSettings, has_children: bool) -> List[str]:
    key = _render_string(node.name)

    if has_children:
        return [f"{pad}{key}:"]

    if not node.values:
        return [f"{pad}{key}: []" if node.sequence else f"{pad}{key}:"]

    if node.sequence or len(node.values) > 1:
        item_pad = pad + " " * settings.indent_step
        return [f"{pad}{key}:"] + [f"{item_pad}- {_render_value(v)}" for v in node.values]

    return [f"{pad}{key}: {_render_value(node.values[0])}"]


def compose_text(nodes: Iterable[Node], settings: Optional[DocumentSettings] = None) -> str:
    """
    Converte uma sequência de nós em texto YAML.

    Args:
        nodes (Iterable[Node]): Nós em ordem de escrita.
        settings (Optional[DocumentSettings]): Parâmetros de escrita.

    Returns:
        str: Documento YAML (vazio quando não há nós).
    """
    settings = settings or DocumentSettings()
    nodes = list(nodes)
    parents = _parent_paths(nodes)

    emitted: Dict[str, int] = {}
    sibling_indent: Dict[str, int] = {}
    lines: List[str] = []

    for node in nodes:
        parent_path = node.path.rpartition(".")[0]

        indent = sibling_indent.get(parent_path)
        if indent is None:
            floor = emitted[parent_path] + 1 if parent_path in emitted else 0
            indent = max(node.indentation, floor)
            sibling_indent[parent_path] = indent
        emitted[node.path] = indent

        lines.extend(node.comments)
        lines.extend(_node_lines(node, " " * indent, settings, node.path in parents))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def compose_document(
    path: Path,
    nodes: Iterable[Node],
    settings: Optional[DocumentSettings] = None,
) -> bool:
    """Escreve os nós no arquivo indicado. Retorna False em falha de I/O."""
    settings = settings or DocumentSettings()
    try:
        Path(path).write_text(compose_text(nodes, settings), encoding=settings.encoding)
    except OSError:
        return False
    return True


__all__ = ["compose_text", "compose_document", "shadowed_paths"]
