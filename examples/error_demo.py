"""
Error reporting demonstration for wson.
"""

import wson
from wson import ParseConfig, ParseError, ParseLimits, SecurityError


def show(text, config=None):
    try:
        wson.parse(text, config=config)
    except ParseError as e:
        print(f"Kind:   {e.kind.name}")
        print(f"Offset: {e.offset}")
        print(str(e))
    except SecurityError as e:
        print("Limit exceeded:")
        print(str(e))


def main():
    print("wson - Error Reporting Demo")
    print("=" * 45)

    print("\n1. Trailing comma")
    show('{"a": 1,}')

    print("\n2. Missing colon")
    show('{"key" "value"}')

    print("\n3. Python literal instead of JSON")
    show('{"enabled": True}')

    print("\n4. Multiline document")
    show(
        """
    {
        "name": "John Doe",
        "age": 030,
        "city": "New York"
    }
    """
    )

    print("\n5. Invalid escape")
    show('{"path": "C:\\Users\\name"}')

    print("\n6. Small context window")
    config = ParseConfig()
    config.max_error_context = 10
    show('{"prefix": "a very long string value", "key": invalid_value}', config)

    print("\n7. Minimal error reporting")
    config = ParseConfig()
    config.include_context = False
    show("[1, 2", config)

    print("\n8. Nesting limit")
    show("[" * 20 + "]" * 20, ParseConfig(limits=ParseLimits(max_nesting_depth=8)))


if __name__ == "__main__":
    main()
