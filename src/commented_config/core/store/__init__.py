# src/commented_config/core/store/__init__.py
"""
Document Store do Commented Config.

Este pacote orquestra leitura, merge com defaults, reconstrução da
árvore de seções e persistência de documentos de configuração.
"""

from .document_store import DocumentStore, LoadResult
from .events import EventLog
from .merge import dropped_paths, merge_defaults

__all__ = ["DocumentStore", "LoadResult", "EventLog", "merge_defaults", "dropped_paths"]
