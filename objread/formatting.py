import logging

from objread.hexdump import hex_dump
from objread.models.obj import ObjectType, ParsedObject
from objread.models.tree import format_tree

__all__ = ["format_object", "render_report", "SEPARATOR"]

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40


def decode_text(body: bytes) -> str:
    return body.decode("utf-8", "surrogateescape")


def format_object(obj_type: str, body: bytes) -> str:
    """Return a readable representation of an object body.

    Commits and tags are plain text and come back as they are. Trees are
    listed like ``git ls-tree``; blobs and unknown types fall back to a hex dump.
    """
    match obj_type:
        case ObjectType.COMMIT | ObjectType.TAG:
            return decode_text(body)
        case ObjectType.TREE:
            return format_tree(body)
        case ObjectType.BLOB:
            return hex_dump(body)
        case _:
            logger.warning(
                "Unknown object type, showing hex representation: %s", obj_type
            )
            return hex_dump(body)


def render_report(obj: ParsedObject) -> str:
    lines = [
        f"signature: {obj.signature}",
        f"type: {obj.type}",
        f"size: {obj.size}",
        SEPARATOR,
        format_object(obj.type, obj.body),
    ]
    return "\n".join(lines) + "\n"
