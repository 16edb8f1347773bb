"""
wson demonstration script.
"""

import wson


def main():
    print("wson - Strict JSON Parser Demo")
    print("=" * 40)

    examples = [
        ("3", "A bare number"),
        (' "caf\\u00e9 \\ud83d\\ude00" ', "Escapes and surrogate pairs"),
        ('{"title": "TITLE1", "revision": 12}', "Small object"),
        ('{"test": "value1", "test": "value2"}', "Duplicate keys (last one wins)"),
        (
            """
        {"menu": {
            "id": "file",
            "popup": {
                "menuitem": [
                    {"value": "New", "onclick": "CreateNewDoc()"},
                    {"value": "Open", "onclick": "OpenDoc()"}
                ]
            }
        }}
        """,
            "Nested document",
        ),
    ]

    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str.strip()}")

        value = wson.parse(json_str)
        print(f"Value:  {value}")
        print(f"Python: {value.to_python()}")

    print(f"\n{len(examples) + 1}. Plain Python data with hooks")
    data = wson.loads('{"price": 19.99, "qty": 3}', parse_float=str)
    print(f"Output: {data}")


if __name__ == "__main__":
    main()
