import hashlib
import logging
import zlib
from dataclasses import dataclass
from enum import StrEnum, auto

from objread.errors import DecompressionError, MalformedHeaderError

__all__ = [
    "ObjectType",
    "ParsedObject",
    "decompress",
    "create_hash",
    "parse_object",
    "read_object",
]

logger = logging.getLogger(__name__)

NULL_BYTE = b"\x00"
SPACE = b" "


class ObjectType(StrEnum):
    COMMIT = auto()
    TREE = auto()
    BLOB = auto()
    TAG = auto()


@dataclass(frozen=True, kw_only=True)
class ParsedObject:
    signature: str
    type: str
    size: int
    body: bytes

    @property
    def size_matches(self) -> bool:
        return len(self.body) == self.size


def decompress(data: bytes, *, decompressor=zlib.decompress) -> bytes:
    try:
        return decompressor(data)
    except zlib.error as e:
        raise DecompressionError(f"couldn't uncompress zlib data ({e})") from e


def create_hash(data: bytes, *, hasher=hashlib.sha1) -> str:
    return hasher(data).hexdigest()


def _parse_size(size_text: bytes) -> int:
    if not size_text.isdigit():
        raise MalformedHeaderError(f"invalid object size: {size_text!r}")
    return int(size_text)


def parse_object(raw: bytes) -> ParsedObject:
    """Split a decompressed object into its header fields and body.

    Objects are stored as ``<type> <size>\\0<body>``. The signature is the
    SHA-1 of the whole decompressed buffer, header included. A declared size
    that disagrees with the body length is logged and otherwise ignored.
    """
    signature = create_hash(raw)

    space = raw.find(SPACE)
    nul = raw.find(NULL_BYTE)
    if space == -1:
        raise MalformedHeaderError("invalid object format: no space after type")
    if nul == -1 or nul < space:
        raise MalformedHeaderError("invalid object format: no NUL after size")

    type_bytes, size_text, body = raw[:space], raw[space + 1 : nul], raw[nul + 1 :]
    if not type_bytes or not type_bytes.isascii():
        raise MalformedHeaderError(f"invalid object type: {type_bytes!r}")
    size = _parse_size(size_text)

    obj = ParsedObject(
        signature=signature, type=type_bytes.decode("ascii"), size=size, body=body
    )
    if not obj.size_matches:
        logger.warning(
            "Size mismatch: got %d, but was actually %d", obj.size, len(obj.body)
        )
    logger.debug("parsed %s %s (%d bytes)", obj.type, obj.signature, obj.size)
    return obj


def read_object(data: bytes) -> ParsedObject:
    return parse_object(decompress(data))
