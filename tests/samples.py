"""Shared sample tables for the color and conversion tests."""

# hex string -> expected bytes (r, g, b, a)
samples_hex_bytes = {
    "#000000": (0, 0, 0, 255),
    "#ffffff": (255, 255, 255, 255),
    "#ff8000": (255, 128, 0, 255),
    "2563eb": (37, 99, 235, 255),
    "#F8FAFC": (248, 250, 252, 255),
    "#fa0": (255, 170, 0, 255),
    "0F0": (0, 255, 0, 255),
    "#1234": (17, 34, 51, 68),
    "abcd": (170, 187, 204, 221),
    "#ff800080": (255, 128, 0, 128),
    "00000000": (0, 0, 0, 0),
    "#DeadBeef": (222, 173, 190, 239),
}

# shorthand -> long form
samples_shorthand = {
    "fff": "ffffff",
    "#000": "#000000",
    "a1c": "aa11cc",
    "#F0A": "#FF00AA",
    "1234": "11223344",
    "#abcd": "#aabbccdd",
    "0f08": "00ff0088",
}

# bytes -> formatted hex
samples_bytes_hex = {
    (0, 0, 0): "#000000",
    (255, 255, 255): "#ffffff",
    (255, 128, 0): "#ff8000",
    (1, 2, 3): "#010203",
    (16, 171, 205): "#10abcd",
    (37, 99, 235): "#2563eb",
}

samples_invalid_hex = [
    "",
    "#",
    "12345",
    "#12345",
    "1234567",
    "123456789",
    "zz0000",
    "#ggg",
    "##fff",
    "#ff 000",
    "0x1234",
    "+ff",
    "f_f",
    "ff_ff_",
    " fff",
    "fff ",
    "#١٢٣",
]
