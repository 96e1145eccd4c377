"""Z-Base32 encoding per RFC 6189 section 5.1.6."""

ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
SHIFT = 5
MASK = 31

_DECODE_MAP = {symbol: value for value, symbol in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """
    Encode bytes as unpadded Z-Base32.

    The input is read as one big-endian bit stream, five bits per output
    symbol. A trailing group shorter than five bits is padded with zero bits
    on the right.

    Args:
        data: Bytes to encode

    Returns:
        Encoded string of ceil(8 * len(data) / 5) symbols
    """
    buffer = 0
    bits_left = 0
    symbols = []
    for byte in bytes(data):
        buffer = (buffer << 8) | byte
        bits_left += 8
        while bits_left >= SHIFT:
            bits_left -= SHIFT
            symbols.append(ALPHABET[MASK & (buffer >> bits_left)])
        buffer &= (1 << bits_left) - 1
    if bits_left > 0:
        symbols.append(ALPHABET[MASK & (buffer << (SHIFT - bits_left))])
    return "".join(symbols)


def decode(text: str) -> bytes:
    """
    Decode a Z-Base32 string produced by encode().

    Padding bits of the final symbol are discarded.

    Raises:
        ValueError: If text contains a character outside the alphabet.
    """
    buffer = 0
    bits_left = 0
    out = bytearray()
    for char in text.lower():
        try:
            value = _DECODE_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid Z-Base32 character: {char!r}") from None
        buffer = (buffer << SHIFT) | value
        bits_left += SHIFT
        if bits_left >= 8:
            bits_left -= 8
            out.append(0xFF & (buffer >> bits_left))
            buffer &= (1 << bits_left) - 1
    return bytes(out)
