# src/commented_config/core/section/tree.py
"""
Árvore de seções endereçada por caminho pontuado.

Este módulo define `Section`, o nó da árvore de configuração. Cada seção
envolve exatamente um `Node` (o nó base; a raiz não possui nó base) e
mantém um mapa ordenado de segmento → seção filha.

Responsabilidades do módulo:
    - Resolver caminhos pontuados (`get_section`, `get_node`, `contains`)
    - Criar seções sob demanda, sintetizando intermediárias (`get_or_create`)
    - Anexar seções já construídas (`create_section`, `add_child_index`)
    - Achatar a árvore em sequência ordenada de nós (`flatten`)
    - Reconstruir a árvore a partir de nós planos (`decode`)
    - Enumerar chaves e mutar valores

Decisões arquiteturais:
    - A travessia é terminada por posição do segmento, nunca por igualdade
      textual com o último segmento: caminhos com segmentos repetidos
      (ex.: "a.b.a") resolvem corretamente
    - `create_section` compara listas de segmentos contra o caminho da
      seção receptora, sem heurística de contenção de texto
    - `decode` nunca sintetiza intermediárias; `get_or_create` sempre sintetiza

Invariantes:
    - A ordem de inserção dos filhos é preservada no achatamento
    - Chaves de filhos são únicas; reinserir uma chave substitui no lugar
    - O caminho de uma seção filha é o caminho do pai + "." + segmento
      (exceto sob a raiz, onde é apenas o segmento)

Limites explícitos:
    - Não realiza I/O
    - Não oferece remoção de seções
    - Não é segura para mutação concorrente
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..document.node import Node, Value
from ..errors import SectionPathError
from .accessors import TypedAccessors

# deslocamento de indentação de seções sintetizadas
INDENT_STEP = 2


def _as_values(values: Iterable[Any]) -> List[Value]:
    return [Value.of(value) for value in values]


class Section(TypedAccessors):
    """
    Nó da árvore de configuração.

    Atributos:
        base_node: nó do documento associado (None apenas na raiz).
        children: mapa ordenado de segmento → seção filha.
    """

    def __init__(self, base_node: Optional[Node] = None) -> None:
        self.base_node = base_node
        self.children: Dict[str, Section] = {}

    def __repr__(self) -> str:
        return f"Section(path={self.path!r}, children={list(self.children)})"

    @property
    def path(self) -> str:
        return self.base_node.path if self.base_node is not None else ""

    def _segments(self) -> List[str]:
        return self.path.split(".") if self.base_node is not None else []

    # ------------------------------------------------------------------
    # Resolução de caminhos
    # ------------------------------------------------------------------
    def get_section(self, path: str) -> Optional["Section"]:
        """Retorna a seção do caminho relativo a esta, ou None se algum segmento faltar."""
        section: Optional[Section] = self
        for segment in path.split("."):
            section = section.children.get(segment)
            if section is None:
                return None
        return section

    def contains(self, path: str) -> bool:
        return self.get_section(path) is not None

    def get_node(self, path: str) -> Optional[Node]:
        section = self.get_section(path)
        return section.base_node if section is not None else None

    # ------------------------------------------------------------------
    # Criação
    # ------------------------------------------------------------------
    def _synthesize(self, name: str, *, positional: bool) -> "Section":
        base = self.base_node

        indentation = base.indentation + INDENT_STEP if base is not None else 0
        if positional and self.children:
            first = next(iter(self.children.values()))
            indentation = first.base_node.indentation

        return Section(
            Node.synthesize(
                parent=base,
                name=name,
                path=f"{base.path}.{name}" if base is not None else name,
                indentation=indentation,
                line_number=(base.line_number if base is not None else 0) + 1,
            )
        )

    def get_or_create(self, path: str, index: Optional[int] = None) -> "Section":
        """
        Resolve o caminho criando as seções ausentes.

        Cada seção ausente recebe um nó sintetizado (sem valores, indentação
        do pai + 2, linha do pai + 1). Com `index`, cada seção criada é
        inserida nessa posição entre os irmãos e herda a indentação do
        primeiro irmão existente; se a posição não existir, é anexada ao final.

        Chamadas repetidas com o mesmo caminho retornam a mesma instância.

        Raises:
            SectionPathError: Se o caminho tiver segmentos vazios.
        """
        segments = path.split(".")
        if not all(segments):
            raise SectionPathError(f"Caminho com segmento vazio: {path!r}")

        section = self
        for segment in segments:
            child = section.children.get(segment)
            if child is None:
                child = section._synthesize(segment, positional=index is not None)
                if index is None or not section.add_child_index(index, segment, child):
                    section.children[segment] = child
            section = child
        return section

    def create_section(self, section: "Section", index: Optional[int] = None) -> bool:
        """
        Anexa uma seção já construída na posição indicada pelo seu próprio caminho.

        O caminho da seção deve estar abaixo desta seção. Segmentos já
        representados pelo caminho desta seção são ignorados; os demais
        intermediários devem existir.

        Returns:
            bool: False apenas quando `index` não corresponde a uma posição existente.

        Raises:
            SectionPathError: Se a seção não tiver nó base, estiver fora desta
                seção ou se faltar uma seção intermediária.
        """
        if section.base_node is None:
            raise SectionPathError("Seção sem nó base não pode ser anexada")

        segments = section.path.split(".")
        own = self._segments()
        if len(segments) <= len(own) or segments[: len(own)] != own:
            raise SectionPathError(
                f"Caminho '{section.path}' não está abaixo de '{self.path}'"
            )

        parent = self
        for segment in segments[len(own):-1]:
            parent = parent.children.get(segment)
            if parent is None:
                raise SectionPathError(
                    f"Seção intermediária '{segment}' ausente para '{section.path}'"
                )

        key = segments[-1]
        if index is None:
            parent.children[key] = section
            return True
        return parent.add_child_index(index, key, section)

    def add_child_index(self, index: int, key: str, section: "Section") -> bool:
        """
        Insere o filho imediatamente antes da entrada hoje na posição `index`.

        Uma entrada existente com a mesma chave é substituída e movida para a
        nova posição. Se `index` não corresponder a nenhuma entrada existente,
        nada é inserido e o retorno é False.
        """
        rebuilt: Dict[str, Section] = {}
        inserted = False

        for position, (existing_key, child) in enumerate(self.children.items()):
            if position == index:
                rebuilt[key] = section
                inserted = True
            if existing_key != key:
                rebuilt[existing_key] = child

        if inserted:
            self.children = rebuilt
        return inserted

    # ------------------------------------------------------------------
    # Achatamento / reconstrução
    # ------------------------------------------------------------------
    def flatten(self) -> List[Node]:
        """Pré-ordem: nó base de cada filho seguido dos seus descendentes."""
        nodes: List[Node] = []
        for child in self.children.values():
            nodes.append(child.base_node)
            nodes.extend(child.flatten())
        return nodes

    def decode(self, nodes: Iterable[Node]) -> List[Node]:
        """
        Anexa cada nó sob a seção do seu caminho pai.

        Os nós devem vir em ordem de documento (ancestrais antes de
        descendentes). Nenhuma intermediária é sintetizada: nós cujo pai
        ainda não existe são ignorados e retornados.

        Returns:
            List[Node]: Nós que não puderam ser anexados.
        """
        orphans: List[Node] = []
        for node in nodes:
            parent_path, _, name = node.path.rpartition(".")
            parent = self.get_section(parent_path) if parent_path else self
            if parent is None:
                orphans.append(node)
                continue
            parent.children[name] = Section(node)
        return orphans

    # ------------------------------------------------------------------
    # Chaves
    # ------------------------------------------------------------------
    def get_keys(self, deep: bool = False) -> List[str]:
        """
        Chaves dos descendentes relativas a esta seção, na ordem do documento.

        Sem `deep`, apenas o primeiro segmento de cada chave (filhos diretos).
        """
        prefix = f"{self.path}." if self.base_node is not None else ""
        keys: Dict[str, None] = {}

        for node in self.flatten():
            key = node.path[len(prefix):] if node.path.startswith(prefix) else node.path
            if not deep:
                key = key.split(".")[0]
            keys.setdefault(key, None)
        return list(keys)

    def get_keys_linked(self, deep: bool = False) -> List[str]:
        return self.get_keys(deep)

    # ------------------------------------------------------------------
    # Mutação
    # ------------------------------------------------------------------
    def set(self, path: str, *values: Any) -> bool:
        """Substitui os valores de um nó existente. False se o caminho não existe."""
        node = self.get_node(path)
        if node is None:
            return False
        node.set_values(_as_values(values))
        return True

    def set_or_create(self, path: str, *values: Any, index: Optional[int] = None) -> Node:
        node = self.get_or_create(path, index).base_node
        node.set_values(_as_values(values))
        return node

    def set_value(self, path: str, value: Any, number: int) -> bool:
        """
        Substitui um único valor posicional.

        Índices além do fim viram o último elemento; negativos viram o
        primeiro. Em lista vazia o valor é acrescentado.
        """
        node = self.get_node(path)
        if node is None:
            return False

        values = list(node.values)
        if not values:
            values.append(Value.of(value))
        else:
            values[min(max(number, 0), len(values) - 1)] = Value.of(value)
        node.set_values(values)
        return True


__all__ = ["Section", "INDENT_STEP"]
