"""Type inference models"""

from dataclasses import dataclass, field
from enum import Enum

from json_to_ts.types import TypeTable


class JsonKind(str, Enum):
    """JSON value kinds recognized by the inferencer."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"  # JSON으로 표현할 수 없는 값


def kind_of(value: object) -> JsonKind:
    """Classify a Python value as a JSON kind"""
    if value is None:
        return JsonKind.NULL
    # bool은 int의 서브클래스이므로 먼저 검사
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    return JsonKind.OTHER


@dataclass(frozen=True)
class InferenceResult:
    """Result of inferring types from one JSON value"""

    root_type: str
    table: TypeTable = field(default_factory=dict)

    @property
    def type_names(self) -> list[str]:
        """Named types in declaration order"""
        return list(self.table)
