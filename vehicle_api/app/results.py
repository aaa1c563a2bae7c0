from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")


# -------- Storage outcomes --------
class FailureKind(str, Enum):
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    detail: str = ""


StoreResult = Union[Found[T], NotFound, Failure]


# -------- Service outcomes --------
class Outcome(Enum):
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    NOT_FOUND = 404
    INVALID = 422
    FAILED = 500

    @property
    def status_code(self) -> int:
        return self.value


@dataclass(frozen=True)
class ServiceResult:
    outcome: Outcome
    payload: Any = None
    errors: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None

    @property
    def status_code(self) -> int:
        return self.outcome.status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400
