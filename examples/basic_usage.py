#!/usr/bin/env python3
"""Basic usage example for json-to-ts

    python examples/basic_usage.py
"""

from json_to_ts import ConverterOptions, convert, infer


def main() -> None:
    data = {
        "name": "Ana",
        "age": 30,
        "hobbies": ["reading", "programming"],
        "address": {"street": "Rua A", "number": 123},
        "orders": [{"id": 1, "total": 9.5}],
    }

    # 1. Default: exported interfaces
    print("=== Interfaces ===")
    print(convert(data, root_name="User"))
    print()

    # 2. Type aliases, optional fields, no export
    print("=== Type aliases ===")
    options = ConverterOptions(
        root_name="User",
        use_interfaces=False,
        export_types=False,
        optional_fields=True,
    )
    print(convert(data, options))
    print()

    # 3. Inspect the inferred table without rendering
    print("=== Inference ===")
    result = infer(data, "User")
    print(f"Root type: {result.root_type}")
    for name in result.type_names:
        print(f"  {name}")


if __name__ == "__main__":
    main()
