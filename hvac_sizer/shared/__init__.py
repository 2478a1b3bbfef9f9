"""
Shared Utilities

Responsibility:
    Cross-cutting helpers used across all layers.
    Generic code that doesn't belong to any specific layer.

Does NOT contain:
    - Layer-specific code
    - Business logic
    - Infrastructure implementations
"""
