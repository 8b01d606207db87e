"""JSend response envelope models."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class JsendStatus(str, Enum):
    """Discriminator values of the three envelope variants."""

    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


class PayloadModel(BaseModel):
    """Frozen model whose optional keys disappear from the payload when unset."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset()

    def to_payload(self) -> Dict[str, Any]:
        """Return the mapping to serialise, keys in declaration order."""

        exclude = {name for name in self.omit_when_none if getattr(self, name) is None}
        return self.model_dump(exclude=exclude or None)


class ErrorItem(PayloadModel):
    """Single failure reason carried in a fail envelope."""

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"field"})

    field: Optional[StrictStr] = Field(
        default=None,
        description="Offending field; absent for payload-level errors",
    )
    error: StrictStr = Field(..., description="Machine readable error identifier")
    message: StrictStr = Field(..., description="Human readable explanation")


class SuccessEnvelope(PayloadModel):
    """``{"status": "success", "data": ..., "meta": {...}}``.

    ``meta`` is ``None`` only for no-content answers, which drop the key.
    """

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"meta"})

    status: Literal["success"] = JsendStatus.SUCCESS.value
    data: Any = None
    meta: Optional[Dict[Any, Any]] = None


class FailEnvelope(PayloadModel):
    """``{"status": "fail", "data": [...], "meta": {...}}``."""

    status: Literal["fail"] = JsendStatus.FAIL.value
    data: List[Any]
    meta: Dict[Any, Any] = Field(default_factory=dict)


class ErrorEnvelope(PayloadModel):
    """``{"status": "error", "message": ..., "data"?: ...}``."""

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"data"})

    status: Literal["error"] = JsendStatus.ERROR.value
    message: StrictStr
    data: Any = None


__all__ = [
    "ErrorEnvelope",
    "ErrorItem",
    "FailEnvelope",
    "JsendStatus",
    "PayloadModel",
    "SuccessEnvelope",
]
