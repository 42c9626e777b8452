"""JSON 값과 생성된 타입 테이블에 쓰는 타입 별칭."""

from __future__ import annotations

from typing import TypeAlias


__all__ = ["JSONPrimitive", "JSONValue", "TypeTable"]

# JSON 직렬화 가능 타입
JSONPrimitive: TypeAlias = None | bool | int | float | str
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]

# 타입 이름 -> 렌더링된 본문 (발견 순서 유지)
TypeTable: TypeAlias = dict[str, str]
