# tests/conftest.py
"""
Fixtures compartilhados para testes do Commented Config.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML de defaults e de usuário semelhantes ao uso real
- uma fábrica de nós planos para testes da árvore sem I/O
- árvores de seções já reconstruídas a partir de nós planos

Decisões arquiteturais:
    - Documentos são fornecidos como string; testes que precisam de
      arquivo os escrevem em `tmp_path`
    - Nós são construídos com o caminho completo, como o parser os produz
    - Fixtures são mantidas simples e explícitas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Sequências de nós sempre trazem ancestrais antes de descendentes

Limites explícitos:
    - Não substituir testes de integração do store
    - Não validar o parser (coberto em tests/core/document)
"""

from typing import Callable, List, Optional

import pytest

from commented_config.core.document.node import Node, Value
from commented_config.core.section.tree import Section


# =====================================================
# Documentos YAML
# =====================================================

@pytest.fixture
def defaults_yaml() -> str:
    """
    Documento de defaults: define a forma e a ordem do documento final.

    Returns:
        str: Conteúdo YAML de defaults.
    """
    return """\
# Configuração do servidor
server:
  host: localhost
  port: 8080
  # TLS opcional
  tls:
    enabled: false
database:
  url: sqlite:///app.db
  pool: 5
features:
  - search
  - export
"""


@pytest.fixture
def user_yaml() -> str:
    """
    Documento do usuário: sobrescreve alguns valores e traz uma chave
    desconhecida dos defaults (`server.legacy`), que deve ser descartada.

    Returns:
        str: Conteúdo YAML do usuário.
    """
    return """\
server:
  port: 9090
  legacy: true
database:
  pool: 20
"""


# =====================================================
# Nós planos e árvores
# =====================================================

@pytest.fixture
def make_node() -> Callable[..., Node]:
    """
    Fábrica de nós planos.

    Uso:
        make_node("a")              → seção (sem valores)
        make_node("a.b", "5")       → nó com um valor str
        make_node("a.c", 1, 2)      → nó com múltiplos valores
    """

    def _make(path: str, *values, indentation: Optional[int] = None) -> Node:
        depth = path.count(".")
        return Node(
            path=path,
            name=path.rsplit(".", 1)[-1],
            indentation=depth * 2 if indentation is None else indentation,
            line_number=0,
            values=[Value.of(v) for v in values],
        )

    return _make


@pytest.fixture
def sample_nodes(make_node) -> List[Node]:
    """Sequência plana em ordem de documento com seções, escalares e lista."""
    return [
        make_node("a"),
        make_node("a.b", "5"),
        make_node("a.c"),
        make_node("a.c.d", "true"),
        make_node("a.c.e", "x", "y", "z"),
        make_node("f", "3.5"),
    ]


@pytest.fixture
def decoded_tree(sample_nodes) -> Section:
    """Árvore reconstruída a partir de `sample_nodes`."""
    tree = Section()
    assert tree.decode(sample_nodes) == []
    return tree
