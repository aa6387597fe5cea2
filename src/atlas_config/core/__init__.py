# src/atlas_config/core/__init__.py
"""
Core do Atlas Config.

Este pacote contém a implementação canônica de carregamento, merge e
consulta de configuração.

Componentes principais:
    - tree     → formas da árvore de valores e sentinela `MISSING`
    - path     → caminhos pontuados (`ConfigPath`)
    - resolver → descida recursiva de caminhos sobre a árvore
    - merge    → deep-merge right-biased entre árvores
    - decode   → decodificação tipada de sub-árvores
    - config   → fachada `Config`
    - sources  → fontes de arquivo, string e valor
    - builder  → agregação sequencial de fontes
    - loader   → configuração em camadas (defaults + local)
    - hashing  → identidade canônica da configuração

Princípios fundamentais:
    - Merge e resolução são puros e nunca falham
    - Apenas a leitura de fontes é fatal
    - Nenhum estado global é mantido
"""
