"""Converter option models.

JSON -> TypeScript 변환 옵션. 호출마다 새로 만들고 변경하지 않는다.
"""

from typing import Any

from pydantic import BaseModel, Field

from json_to_ts.config.settings import DEFAULT_ROOT_NAME, ConverterSettings


class ConverterOptions(BaseModel):
    """변환 옵션 모델.

    dict로 받을 때 알 수 없는 키는 무시한다.
    """

    root_name: str = Field(
        DEFAULT_ROOT_NAME, min_length=1, description="루트 객체에 붙일 타입 이름"
    )
    use_interfaces: bool = Field(
        True, description="True면 interface, False면 type alias로 렌더링"
    )
    export_types: bool = Field(True, description="선언 앞에 export 붙이기")
    optional_fields: bool = Field(False, description="모든 프로퍼티를 optional(?)로 표시")

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "root_name": "User",
                "use_interfaces": True,
                "export_types": True,
                "optional_fields": False,
            }
        },
    }

    @classmethod
    def from_settings(
        cls, settings: ConverterSettings, **overrides: Any
    ) -> "ConverterOptions":
        """Build options from env settings; None overrides are skipped"""
        values: dict[str, Any] = {
            "root_name": settings.root_name,
            "use_interfaces": not settings.use_types,
            "export_types": not settings.no_export,
            "optional_fields": settings.optional,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
