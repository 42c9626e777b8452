"""JSON -> TypeScript type generator.

예시 JSON 값 하나를 깊이 우선으로 순회하며 구조적 타입을 추론하고,
발견된 객체마다 interface(또는 type alias) 선언을 만든다.

Example:
    >>> print(convert('{"user": {"id": 1}}', root_name="Root"))
    export interface User {
      id: number;
    }
    <BLANKLINE>
    export interface Root {
      user: User;
    }
"""

import json
import logging
import re
from collections.abc import Sequence
from typing import Any, Final, NoReturn, cast

import orjson

from json_to_ts.exceptions import InvalidInputError
from json_to_ts.models.inference import InferenceResult, JsonKind, kind_of
from json_to_ts.models.options import ConverterOptions
from json_to_ts.types import JSONValue, TypeTable
from json_to_ts.utils.decorators import logged_call


log = logging.getLogger(__name__)

IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

ANY_TYPE: Final[str] = "any"
ANY_ARRAY_TYPE: Final[str] = "any[]"
NULL_TYPE: Final[str] = "null"
ITEM_SUFFIX: Final[str] = "Item"

PRIMITIVE_TYPES: Final[dict[JsonKind, str]] = {
    JsonKind.NULL: NULL_TYPE,
    JsonKind.BOOLEAN: "boolean",
    JsonKind.NUMBER: "number",
    JsonKind.STRING: "string",
}


def capitalize(text: str) -> str:
    """Upper-case the first character only (str.capitalize lowers the rest)"""
    return text[:1].upper() + text[1:]


def is_valid_identifier(text: str) -> bool:
    """Check whether a key can be used as a bare TypeScript property name"""
    return IDENTIFIER_PATTERN.match(text) is not None


def quote_key(key: str) -> str:
    """Render a property key, quoting it when it is not an identifier"""
    if is_valid_identifier(key):
        return key
    # JSON 문자열 리터럴은 TS 문자열 리터럴로도 유효
    return orjson.dumps(key).decode()


def primitive_type(value: object) -> str:
    """Return the TypeScript primitive name for a scalar value"""
    return PRIMITIVE_TYPES.get(kind_of(value), ANY_TYPE)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str | bytes) -> JSONValue:
    """Parse JSON text.

    orjson rejects a few well-formed documents (numbers overflowing a double,
    unpaired surrogate escapes); those are retried with the stdlib parser.

    Raises:
        InvalidInputError: text is not well-formed JSON
    """
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            raise InvalidInputError(str(e)) from e


class JsonToTypeScript:
    """Infer TypeScript declarations from an example JSON value."""

    def __init__(self, options: ConverterOptions | None = None, **overrides: Any) -> None:
        """Initialize the converter.

        Args:
            options: Converter options (defaults when None)
            **overrides: Option fields replacing values from ``options``
        """
        base = options or ConverterOptions()
        if overrides:
            base = ConverterOptions.model_validate({**base.model_dump(), **overrides})
        self.options = base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.options!r})"

    @logged_call
    def convert(self, json_input: str | bytes | JSONValue) -> str:
        """Convert JSON text or an already parsed value to declarations.

        Raises:
            InvalidInputError: json_input is text and not valid JSON
        """
        data = parse_json(json_input) if isinstance(json_input, (str, bytes)) else json_input
        result = self.infer(data)
        return render(result.table, self.options)

    def infer(self, value: object, root_name: str | None = None) -> InferenceResult:
        """Run inference over a parsed value"""
        table: TypeTable = {}
        root_type = self.generate_type(value, root_name or self.options.root_name, table)
        log.debug("inferred root=%s types=%s", root_type, list(table))
        return InferenceResult(root_type=root_type, table=table)

    def generate_type(self, value: object, type_name: str, table: TypeTable) -> str:
        """Return the type reference for value, registering named types in table.

        Args:
            value: JSON value to inspect
            type_name: Name used if value is an object
            table: Named type table, filled in depth-first discovery order

        Returns:
            Type reference usable inline
        """
        kind = kind_of(value)

        if kind is JsonKind.ARRAY:
            items = cast("Sequence[object]", value)
            if not items:
                return ANY_ARRAY_TYPE
            # 첫 번째 원소만으로 원소 타입을 결정
            item_type = self.generate_type(items[0], f"{type_name}{ITEM_SUFFIX}", table)
            return f"{item_type}[]"

        if kind is JsonKind.OBJECT:
            mapping = cast("dict[object, object]", value)
            optional = "?" if self.options.optional_fields else ""
            properties = []
            for raw_key, val in mapping.items():
                key = str(raw_key)
                property_type = self.generate_type(val, capitalize(key), table)
                properties.append(f"  {quote_key(key)}{optional}: {property_type};")

            if type_name in table:
                log.debug("type name collision, overwriting %s", type_name)
            table[type_name] = "{\n" + "\n".join(properties) + "\n}"
            return type_name

        return PRIMITIVE_TYPES.get(kind, ANY_TYPE)


def render(table: TypeTable, options: ConverterOptions | None = None) -> str:
    """Render a named type table as declaration text.

    Args:
        table: Type name -> body, in declaration order
        options: Rendering options (export marker, interface vs alias)

    Returns:
        Declarations separated by a blank line, trailing whitespace trimmed
    """
    opts = options or ConverterOptions()
    export_keyword = "export " if opts.export_types else ""

    declarations = []
    for name, body in table.items():
        if opts.use_interfaces:
            declarations.append(f"{export_keyword}interface {name} {body}")
        else:
            declarations.append(f"{export_keyword}type {name} = {body};")

    return "\n\n".join(declarations).rstrip()


def infer(
    value: object,
    root_name: str | None = None,
    options: ConverterOptions | None = None,
) -> InferenceResult:
    """Infer the root type reference and named type table for a parsed value"""
    return JsonToTypeScript(options).infer(value, root_name)


def convert(
    json_input: str | bytes | JSONValue,
    options: ConverterOptions | None = None,
    **overrides: Any,
) -> str:
    """Convert JSON text or a parsed value to TypeScript declarations.

    Args:
        json_input: JSON text, bytes, or a parsed value
        options: Converter options
        **overrides: Individual option fields (e.g. root_name="User")

    Raises:
        InvalidInputError: json_input is text and not valid JSON
    """
    return JsonToTypeScript(options, **overrides).convert(json_input)
