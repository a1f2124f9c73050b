# src/commented_config/core/store/document_store.py
"""
Document Store canônico (v1).

Orquestra o ciclo de vida de um documento de configuração:

    arquivo → [parser] → nós planos → (merge com defaults) → [decode] → árvore
    árvore → [flatten] → nós planos → [composer] → arquivo

O store é ele próprio a raiz da árvore de seções (`Section` sem nó base),
de modo que todos os accessors e mutações estão disponíveis diretamente.

Decisões (v1):
    - Fonte do load: o arquivo principal se existir, senão o de defaults
    - Com `copy_defaults`, os defaults ditam forma e ordem; o usuário fornece valores
    - Todo load termina reescrevendo o arquivo principal
    - O resultado do load informa se a persistência funcionou (`LoadResult.saved`)
    - O arquivo de defaults é apenas lido, nunca reescrito

Invariantes:
    - Cada load produz uma árvore nova (a anterior é descartada)
    - Falhas de I/O na gravação retornam False e geram evento ERROR
    - Nós sem seção pai durante o decode geram warning, não exceção
    - Valores de nós que também possuem filhos não são gravados e geram warning

Limites explícitos:
    - Não preserva comentários inline
    - Não é segura para uso concorrente
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar, Union

from ..document.composer import compose_document, shadowed_paths
from ..document.node import Node
from ..document.parser import parse_document
from ..document.settings import DocumentSettings
from ..errors import DocumentNotFoundError
from ..section.accessors import Lookup
from ..section.tree import Section
from .events import EventLog
from .merge import dropped_paths, merge_defaults

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult:
    """Resumo de um load: fonte lida, se houve merge, se foi salvo e nós ignorados."""

    source: Path
    merged: bool
    saved: bool
    skipped: Tuple[str, ...] = ()


class DocumentStore(Section):
    """
    Documento de configuração com defaults opcionais.

    Args:
        file: arquivo principal (lido se existir e sempre reescrito no load).
        defaults: arquivo de defaults (opcional).
        settings: parâmetros do motor de documento.
        debug: registra eventos DEBUG para cada valor resolvido.

    Raises:
        UnsupportedDocumentFormatError: Se algum arquivo não for YAML.
    """

    def __init__(
        self,
        *,
        file: Union[str, Path],
        defaults: Optional[Union[str, Path]] = None,
        settings: Optional[DocumentSettings] = None,
        debug: bool = False,
    ) -> None:
        super().__init__(None)
        self.settings = settings or DocumentSettings()
        self.file = Path(file)
        self.defaults = Path(defaults) if defaults is not None else None

        self.settings.check_format(self.file)
        if self.defaults is not None:
            self.settings.check_format(self.defaults)

        self.event_log = EventLog(document=str(self.file), debug=debug)

    @property
    def events(self) -> List[Dict[str, Any]]:
        return self.event_log.events

    @property
    def warnings(self) -> List[str]:
        return self.event_log.warnings

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def _default_nodes(self) -> List[Node]:
        tree = Section()
        tree.decode(parse_document(self.defaults, self.settings))
        return tree.flatten()

    def load(self, copy_defaults: bool = True) -> LoadResult:
        """
        Carrega o documento, mescla com defaults (opcional) e o persiste.

        Raises:
            DocumentNotFoundError: Se nem o arquivo principal nem os defaults existirem.
            DocumentParseError: Se algum documento for YAML inválido.
        """
        source = self.file if self.file.exists() else self.defaults
        if source is None:
            raise DocumentNotFoundError(f"Documento não encontrado e sem defaults: {self.file}")

        loaded = parse_document(source, self.settings)
        self.event_log.log(level="INFO", message="Documento lido", source=str(source), nodes=len(loaded))

        merged = copy_defaults and self.defaults is not None
        if merged:
            default_nodes = self._default_nodes()
            nodes = merge_defaults(loaded, default_nodes)

            user_paths = {node.path for node in loaded}
            overridden = sum(1 for node in default_nodes if node.path in user_paths)
            self.event_log.log(
                level="INFO",
                message="Defaults mesclados",
                defaults=str(self.defaults),
                overridden=overridden,
                backfilled=len(default_nodes) - overridden,
                dropped=dropped_paths(loaded, default_nodes),
            )
        else:
            nodes = loaded

        self.children = {}
        orphans = self.decode(nodes)
        for node in orphans:
            self.event_log.add_warning(f"Nó sem seção pai ignorado: {node.path}")
            self.event_log.log(
                level="WARNING",
                message="Nó sem seção pai ignorado",
                path=node.path,
                line=node.line_number,
            )

        saved = self.save(self.file)
        return LoadResult(
            source=source,
            merged=merged,
            saved=saved,
            skipped=tuple(node.path for node in orphans),
        )

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------
    def save(self, file: Optional[Union[str, Path]] = None) -> bool:
        """Persiste a árvore achatada. Retorna False se o arquivo não puder ser criado ou escrito."""
        target = Path(file) if file is not None else self.file

        if not target.exists():
            try:
                target.touch()
            except OSError as e:
                self.event_log.log(
                    level="ERROR",
                    message="Falha ao criar documento",
                    target=str(target),
                    error=str(e),
                )
                return False

        nodes = self.flatten()
        for path in shadowed_paths(nodes):
            self.event_log.add_warning(f"Valores descartados em seção com filhos: {path}")
            self.event_log.log(
                level="WARNING",
                message="Valores descartados em seção com filhos",
                target=str(target),
                path=path,
            )

        saved = compose_document(target, nodes, self.settings)
        self.event_log.log(
            level="INFO" if saved else "ERROR",
            message="Documento salvo" if saved else "Falha ao salvar documento",
            target=str(target),
            nodes=len(nodes),
        )
        return saved

    # ------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------
    def lookup(self, path: str, parse: Callable[[str], T], default: T) -> Lookup[T]:
        result = super().lookup(path, parse, default)
        self.event_log.log(
            level="DEBUG",
            message="Valor resolvido",
            path=path,
            value=result.value,
            defaulted=result.defaulted,
        )
        return result


__all__ = ["DocumentStore", "LoadResult"]
