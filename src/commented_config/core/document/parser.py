# src/commented_config/core/document/parser.py
"""
Parser canônico de documentos YAML em nós planos.

Este módulo converte um documento YAML na sequência plana e ordenada
de `Node` consumida pela árvore de seções.

A gramática YAML é inteiramente responsabilidade do PyYAML: o módulo
apenas percorre o grafo de nós produzido por `yaml.compose` e o achata
em ordem de documento (pré-ordem), preservando posição, indentação e
comentários imediatamente acima de cada chave.

Política de conversão (v1):
    - mapa → nó de seção (sem valores) seguido dos nós filhos
    - escalar → nó com um único valor
    - chave sem valor (`key:`) → nó de seção
    - lista de escalares → nó com múltiplos valores (`sequence=True`)

Decisões arquiteturais:
    - A raiz do documento deve ser um mapa
    - Documento vazio produz sequência vazia
    - Ancestrais sempre precedem descendentes na sequência produzida
    - Erros de sintaxe são encapsulados em `DocumentParseError`

Invariantes:
    - Cada `Node` carrega seu caminho pontuado completo
    - `line_number` é 1-based e `indentation` é a coluna da chave

Limites explícitos:
    - Não implementa gramática própria
    - Não suporta listas de mapas ou listas aninhadas
    - Não preserva comentários inline nem comentários ao final do documento
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Set

import yaml  # PyYAML

from ..errors import (
    DocumentNotFoundError,
    DocumentParseError,
    InvalidDocumentRootError,
    UnsupportedDocumentStructureError,
)
from .node import Node, Value
from .settings import DocumentSettings

_NULL_TAG = "tag:yaml.org,2002:null"


def _tag_name(tag: str) -> str:
    return tag.rsplit(":", 1)[-1]


def _line_after(mark: yaml.Mark, lines: List[str]) -> int:
    """Primeira linha inteiramente posterior à marca."""
    head = lines[mark.line][: mark.column] if mark.line < len(lines) else ""
    return mark.line + 1 if head.strip() else mark.line


def _value_end(node: yaml.Node) -> yaml.Mark:
    # o fim de uma coleção em bloco fica após os comentários seguintes
    if isinstance(node, (yaml.MappingNode, yaml.SequenceNode)) and not node.flow_style and node.value:
        last = node.value[-1]
        return _value_end(last[1] if isinstance(node, yaml.MappingNode) else last)
    return node.end_mark


def _leading_comments(lines: List[str], line_index: int, floor: int) -> List[str]:
    """
    Coleta o bloco contíguo de comentários e linhas brancas acima da chave.

    A busca não passa de `floor`, a primeira linha após o valor anterior,
    de modo que linhas de escalares em bloco nunca viram comentários.
    """
    collected: List[str] = []
    i = line_index - 1
    while i >= floor:
        stripped = lines[i].strip()
        if stripped and not stripped.startswith("#"):
            break
        collected.append(lines[i])
        i -= 1
    collected.reverse()
    return collected


def _values_of(value_node: yaml.Node, path: str) -> List[Value]:
    if isinstance(value_node, yaml.MappingNode):
        return []

    if isinstance(value_node, yaml.SequenceNode):
        values: List[Value] = []
        for item in value_node.value:
            if not isinstance(item, yaml.ScalarNode):
                raise UnsupportedDocumentStructureError(
                    f"Lista com itens não escalares em '{path}' (linha {item.start_mark.line + 1})"
                )
            values.append(Value(item.value, _tag_name(item.tag)))
        return values

    if value_node.tag == _NULL_TAG and value_node.value == "":
        return []
    return [Value(value_node.value, _tag_name(value_node.tag))]


def _walk(
    mapping: yaml.MappingNode,
    parent: Optional[Node],
    lines: List[str],
    out: List[Node],
    floor: int,
    active: Set[int],
) -> None:
    if id(mapping) in active:
        where = parent.path if parent is not None else "<raiz>"
        raise UnsupportedDocumentStructureError(
            f"Referência cíclica em '{where}' (linha {mapping.start_mark.line + 1})"
        )
    active.add(id(mapping))

    for key_node, value_node in mapping.value:
        if not isinstance(key_node, yaml.ScalarNode):
            raise UnsupportedDocumentStructureError(
                f"Chave complexa não suportada (linha {key_node.start_mark.line + 1})"
            )

        name = key_node.value
        if not name or "." in name:
            raise UnsupportedDocumentStructureError(
                f"Chave inválida para endereçamento pontuado: {name!r} (linha {key_node.start_mark.line + 1})"
            )

        path = name if parent is None else f"{parent.path}.{name}"
        line_index = key_node.start_mark.line

        node = Node(
            path=path,
            name=name,
            indentation=key_node.start_mark.column,
            line_number=line_index + 1,
            raw_line=lines[line_index] if line_index < len(lines) else "",
            values=_values_of(value_node, path),
            parent=parent,
            comments=_leading_comments(lines, line_index, floor),
            sequence=isinstance(value_node, yaml.SequenceNode),
        )
        out.append(node)

        if isinstance(value_node, yaml.MappingNode):
            _walk(value_node, node, lines, out, _line_after(key_node.end_mark, lines), active)
        floor = _line_after(_value_end(value_node), lines)

    active.discard(id(mapping))


def parse_text(text: str) -> List[Node]:
    """
    Converte um texto YAML na sequência plana e ordenada de nós.

    Args:
        text (str): Conteúdo YAML.

    Returns:
        List[Node]: Nós em ordem de documento (ancestrais antes de descendentes).

    Raises:
        DocumentParseError: Se o YAML for sintaticamente inválido.
        InvalidDocumentRootError: Se a raiz não for um mapa.
        UnsupportedDocumentStructureError: Se houver estruturas não endereçáveis.
    """
    try:
        root = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"YAML inválido: {e}") from e

    if root is None:
        return []

    if not isinstance(root, yaml.MappingNode):
        raise InvalidDocumentRootError(
            f"Raiz do documento deve ser um mapa, recebido: {root.id}"
        )

    nodes: List[Node] = []
    _walk(root, None, text.splitlines(), nodes, 0, set())
    return nodes


def parse_document(path: Path, settings: Optional[DocumentSettings] = None) -> List[Node]:
    """Lê um arquivo YAML e o converte em nós planos."""
    settings = settings or DocumentSettings()
    path = Path(path)

    if not path.exists():
        raise DocumentNotFoundError(f"Documento não encontrado: {path}")

    return parse_text(path.read_text(encoding=settings.encoding))


__all__ = ["parse_text", "parse_document"]
