"""
Parameter validation utilities for validator construction.

Validators check their configuration eagerly so a misconfigured rule set
fails when it is built rather than when a record is validated.
"""

from collections.abc import Collection


class ParameterError(ValueError):
    """Raised when a validator parameter is invalid."""
    pass


def validate_bound(bound: int, field_name: str = "bound") -> int:
    """
    Validate a length or size bound.

    Bounds must be non-negative integers. bool is rejected even though it
    is an int subclass.

    Args:
        bound: The bound to validate
        field_name: Name of the parameter (for error messages)

    Returns:
        The validated bound

    Raises:
        ParameterError: If validation fails

    Examples:
        >>> validate_bound(3)
        3
        >>> validate_bound(-1)  # doctest: +SKIP
        ParameterError: bound must be a non-negative integer, got -1
    """
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise ParameterError(f"{field_name} must be an integer, got {type(bound).__name__}")

    if bound < 0:
        raise ParameterError(f"{field_name} must be a non-negative integer, got {bound}")

    return bound


def validate_content_types(
    content_types: Collection[str],
    field_name: str = "valid_types",
) -> frozenset[str]:
    """
    Validate a collection of allowed content types.

    Args:
        content_types: Allowed content types ("pdf", "image/png", ...)
        field_name: Name of the parameter (for error messages)

    Returns:
        The content types as a frozenset

    Raises:
        ParameterError: If validation fails

    Examples:
        >>> sorted(validate_content_types(["pdf", "zip"]))
        ['pdf', 'zip']
        >>> validate_content_types("pdf")  # doctest: +SKIP
        ParameterError: valid_types must be a collection of strings, not a string
    """
    if isinstance(content_types, str) or not isinstance(content_types, Collection):
        raise ParameterError(f"{field_name} must be a collection of strings, not a string")

    if not content_types:
        raise ParameterError(f"{field_name} must not be empty")

    for i, content_type in enumerate(content_types):
        if not isinstance(content_type, str):
            raise ParameterError(
                f"{field_name}[{i}] must be a string, got {type(content_type).__name__}"
            )

    return frozenset(content_types)
