"""Basic chromahex usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromahex import (
    ColorArray,
    FormatType,
    HexParseError,
    from_hex,
    rgb255,
    rgba,
    to_hex,
    to_rgba,
    try_from_hex,
)


def demonstrate_colors() -> None:
    # Build colors from floats, bytes and hex, then read them back.
    accent = rgb255(255, 128, 64)
    print("Accent as floats:", to_rgba(accent))
    print("Accent as hex:", to_hex(accent))

    glass = rgba(0.2, 0.4, 0.6, 0.5)
    print("Glass as percentages:", glass.to_format(FormatType.PERCENTAGE))

    short = from_hex("#f80")
    print("#f80 expands to:", short.to_hex().hex)


def demonstrate_errors() -> None:
    # Malformed input is reported, never replaced by a default color.
    try:
        from_hex("12345")
    except HexParseError as exc:
        print("Rejected:", exc)

    result = try_from_hex("#zzz")
    print("try_from_hex ok?", result.ok, "-", result.error)


def demonstrate_arrays() -> None:
    # Parse and format many colors at once.
    palette = ColorArray.from_hex(["#f8fafc", "#2563eb", "#0f172a80"])
    print("Palette array:\n", palette.to_rgba())
    print("Palette hex:", [h.hex for h in palette.to_hex()])


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_errors()
    demonstrate_arrays()
