# src/commented_config/core/errors.py
"""
Exceções canônicas do Commented Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura, validação estrutural e composição de documentos de
configuração, e durante a inserção explícita de seções na árvore.

As exceções aqui definidas representam **violações estruturais
explícitas**. Ausências de caminho, falhas de coerção de valores e
falhas de gravação não são exceções: são absorvidas como `None`,
valor default ou retorno booleano.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais do documento são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigError`
    - Nenhuma exceção é levantada por lookups ou accessors tipados

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos

Este módulo existe para garantir clareza,
consistência e previsibilidade no tratamento de erros de configuração.
"""


class ConfigError(Exception):
    """
    Exceção base para erros do Commented Config.

    Todas as exceções levantadas durante leitura, composição e
    manipulação estrutural da árvore de seções herdam desta classe,
    permitindo captura genérica pelo chamador.
    """


class DocumentNotFoundError(ConfigError):
    """
    Exceção levantada quando nenhum documento legível existe no caminho
    solicitado.

    Decisões arquiteturais:
        - Um load sem arquivo principal e sem defaults é inválido
        - O arquivo de defaults, quando declarado, deve existir

    Limites explícitos:
        - Não tenta criar o documento automaticamente antes do parse
    """


class UnsupportedDocumentFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidDocumentRootError(ConfigError):
    """
    Exceção levantada quando a raiz do documento não é um mapa.

    Invariantes:
        - Toda seção é endereçada por caminho pontuado a partir de um mapa raiz
        - Listas ou escalares na raiz não possuem caminho
    """


class DocumentParseError(ConfigError):
    """Exceção levantada quando o YAML é sintaticamente inválido."""


class UnsupportedDocumentStructureError(ConfigError):
    """
    Exceção levantada quando o documento contém estruturas que não podem
    ser representadas como nós endereçáveis por caminho pontuado.

    Exemplos:
        - chaves complexas (mapas ou listas usados como chave)
        - chaves vazias ou contendo `.`
        - listas contendo mapas ou listas aninhadas
    """


class SectionPathError(ConfigError):
    """
    Exceção levantada por `create_section` quando o caminho da seção
    não pode ser anexado à árvore.

    Decisões arquiteturais:
        - `create_section` nunca sintetiza seções intermediárias
        - Caminhos fora da seção receptora são rejeitados explicitamente
    """
