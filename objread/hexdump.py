__all__ = ["hex_dump"]

BYTES_PER_LINE = 16
# Gap between the hex and character columns of a full line
COLUMN_GAP = 4


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte <= 126 else "."


def _format_line(chunk: bytes) -> str:
    hex_column = "".join(f"{byte:02x} " for byte in chunk)
    padding = " " * ((BYTES_PER_LINE - len(chunk)) * 3 + COLUMN_GAP)
    char_column = "".join(_printable(byte) for byte in chunk)
    return hex_column + padding + char_column


def hex_dump(data: bytes) -> str:
    """Return ``data`` as rows of 16 hex bytes followed by their characters.

    Bytes outside printable ASCII show as ``.`` in the character column.
    """
    return "\n".join(
        _format_line(data[i : i + BYTES_PER_LINE])
        for i in range(0, len(data), BYTES_PER_LINE)
    )
