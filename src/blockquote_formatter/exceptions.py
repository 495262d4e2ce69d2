"""Exception types for blockquote-formatter."""

from typing import Any, Dict, Optional

from pydantic import ValidationError


class ConfigurationError(ValueError):
    """
    Formatting options are invalid.

    Raised while building the configuration, before any wrapping work
    starts. Carries:
    - Human-readable message
    - Name of the offending option, when known
    - Optional additional details
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            field: Option that failed validation
            details: Optional additional context/details
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details or {}

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ConfigurationError":
        """Collapse a pydantic ValidationError into a single ConfigurationError."""
        errors = exc.errors(include_url=False)
        problems = []
        for err in errors:
            loc = ".".join(str(part) for part in err["loc"])
            msg = err["msg"]
            # model_validator failures carry no location
            problems.append(f"{loc}: {msg}" if loc else msg)

        first_loc = errors[0]["loc"] if errors else ()
        field = str(first_loc[0]) if first_loc else None
        return cls(
            "Invalid blockquote configuration: " + "; ".join(problems),
            field=field,
            details={"errors": problems},
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for structured output.

        Returns:
            Dictionary with error, message, field, and details fields
        """
        return {
            "error": "CONFIGURATION_ERROR",
            "message": self.message,
            "field": self.field,
            "details": self.details
        }
