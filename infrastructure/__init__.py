"""
Infrastructure Layer
- Purpose: Provide concrete implementations the core depends on through its interfaces
- Key Directories:
    - catalog: default exercise bindings and the classifier factory
    - di: dependency providers for the interface layer
"""
