from __future__ import annotations

"""
Error type for abi_params.

The type model itself never raises for well-formed trees; ParamTypeError is
raised by the opt-in validation layer (abi_params.validate), by strict-mode
construction, and by function_signature for malformed names.

    ParamTypeError("uint7: width must be a multiple of 8 in 8..256",
                   code="invalid_width", context={"width": 7})
"""

from typing import Any, Dict, Mapping, Optional

__all__ = [
    "ParamTypeError",
    "INVALID_WIDTH",
    "INVALID_LENGTH",
    "INVALID_CHILD",
    "TOO_DEEP",
    "INVALID_NAME",
]

INVALID_WIDTH = "invalid_width"
INVALID_LENGTH = "invalid_length"
INVALID_CHILD = "invalid_child"
TOO_DEEP = "too_deep"
INVALID_NAME = "invalid_name"


class ParamTypeError(TypeError):
    """
    Raised when a parameter type is malformed or exceeds configured limits.

    Attributes:
        code: short machine-readable code string
        message: human-readable message
        context: extra fields for debugging (offending width, length, path, ...)
    """

    def __init__(
        self,
        message: str = "",
        *,
        code: str = "param_type_error",
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.code = str(code)
        self.message = str(message)
        self.context: Dict[str, Any] = dict(context) if context else {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            return f"{self.code}: {self.message} ({self.context})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": dict(self.context)}
