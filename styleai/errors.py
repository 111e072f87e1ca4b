"""Failure kinds raised by the AI flows."""

from typing import Any


class FlowError(Exception):
    kind: str = "flow_error"

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        # Name of the flow that raised, filled in by the flow wrapper.
        self.flow: str | None = None


class InputValidationError(FlowError, ValueError):
    """Input did not match the flow's schema. Raised before any provider call."""

    kind = "invalid_input"


class ProviderError(FlowError, RuntimeError):
    """The Gemini call failed or returned nothing usable."""

    kind = "provider_error"


class OutputShapeError(FlowError, RuntimeError):
    """The model answered, but not in the declared output shape."""

    kind = "invalid_output"


def summarize_validation_errors(errors: list[dict]) -> list[dict]:
    """Keep location, message and type; drop echoed input so photo payloads never leak."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in errors
    ]
