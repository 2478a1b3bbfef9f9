"""
Application Layer Package

Responsibility:
    Coordinates use cases between the API/scripts and the domain.

Architecture Notes:
    - Orchestration layer between API and Domain
    - Contains Queries (read) and Use Cases
    - Dependencies (catalog, engine) injected through constructors

Contains:
    - queries/: CQRS read operations (catalog validation report)
    - services/: Use Cases (recommendation calculation)

Does NOT contain:
    - Domain business rules (in Domain Layer)
    - HTTP handling (in API Layer)
    - File formats (in Infrastructure Layer)
"""
