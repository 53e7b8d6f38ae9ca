"""Comparison subsystem exceptions."""


class ComparisonError(Exception):
    """Base class for comparison errors."""


class ComparisonConfigError(ComparisonError, ValueError):
    """Invalid comparison options (for example a negative margin)."""


class ComparisonTypeError(ComparisonError, TypeError):
    """An operation that needs a composite received something else."""
