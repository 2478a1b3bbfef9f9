"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All raised domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - Equipment data faults are NOT exceptions: a catalog record that breaks
      its type's field rules becomes an EquipmentValidationError value object
      and the calculation carries on. Exceptions here cover failures that
      stop an operation outright (catalog cannot be loaded, unknown id).
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    All domain-specific exceptions inherit from this class to enable
    type-safe error handling in Application and API layers.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes

    Examples:
        >>> raise DomainException("Business rule violation")

        >>> try:
        ...     catalog = loader.load(path)
        ... except DomainException as e:
        ...     logger.error(f"Domain error: {e}")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class CatalogLoadError(DomainException):
    """
    Raised when the equipment catalog cannot be loaded.

    This exception is raised when:
    - Catalog file does not exist
    - JSON/CSV/Excel content cannot be parsed
    - A catalog record fails field validation (wrong enum value, bad number)

    Attributes:
        file_path: Path to catalog file that failed (optional)
        original_error: Underlying parser/validation exception (optional)
        row: 1-based record number that failed validation (optional)

    Examples:
        >>> raise CatalogLoadError(
        ...     "Invalid equipment record",
        ...     file_path="catalog.csv",
        ...     row=12,
        ... )
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        original_error: Exception | None = None,
        row: int | None = None,
    ) -> None:
        """
        Initialize catalog load error.

        Args:
            message: Error description
            file_path: Path to file that failed (optional)
            original_error: Original exception (optional)
            row: Record number that failed (optional)
        """
        self.file_path = file_path
        self.original_error = original_error
        self.row = row

        detailed_parts = [message]
        if file_path:
            detailed_parts.append(f"File: {file_path}")
        if row is not None:
            detailed_parts.append(f"Record: {row}")
        if original_error:
            detailed_parts.append(
                f"Original error: {type(original_error).__name__}: {original_error}"
            )

        super().__init__(" | ".join(detailed_parts))


class UnsupportedCatalogFormatError(DomainException):
    """
    Raised when the catalog file extension is not supported.

    Supported formats: .json, .csv, .xlsx, .xls

    Examples:
        >>> raise UnsupportedCatalogFormatError(
        ...     "Unsupported catalog format", suffix=".xml"
        ... )
    """

    def __init__(self, message: str, suffix: str | None = None) -> None:
        """
        Initialize unsupported format error.

        Args:
            message: Error description
            suffix: Offending file extension (optional)
        """
        self.suffix = suffix
        if suffix:
            super().__init__(f"{message}: '{suffix}'")
        else:
            super().__init__(message)


class EquipmentNotFoundError(DomainException):
    """
    Raised when an equipment id is not present in the catalog.

    Examples:
        >>> raise EquipmentNotFoundError("furn-999")
    """

    def __init__(self, equipment_id: str) -> None:
        """
        Initialize equipment lookup error.

        Args:
            equipment_id: Id that was looked up
        """
        self.equipment_id = equipment_id
        super().__init__(f"Equipment '{equipment_id}' not found in catalog")
