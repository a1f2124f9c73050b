# src/commented_config/core/__init__.py
"""
Core do Commented Config.

Componentes principais:
    - document → modelo de nós, parser e composer YAML (PyYAML)
    - section  → árvore de seções e accessors tipados
    - store    → load com merge de defaults, persistência e log de eventos
    - errors   → hierarquia canônica de exceções

Princípios fundamentais:
    - A árvore nunca lê texto: consome e produz sequências planas de nós
    - Ausências e falhas de conversão viram defaults, nunca exceções
    - Falhas estruturais do documento são exceções tipadas

Limites explícitos:
    - Não é seguro para mutação concorrente
    - Não define gramática YAML própria
"""
