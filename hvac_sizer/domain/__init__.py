"""
Domain Layer

Pure business logic of the sizing engine. No framework, file or network
dependencies beyond pydantic for value validation.

Subdomains:
    - equipment: Sizing rules, validation and recommendations
    - shared: Exceptions common to the whole domain
"""
