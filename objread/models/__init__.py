from .obj import ObjectType, ParsedObject, decompress, parse_object, read_object
from .tree import TreeEntry, decode_tree_entries, format_tree

__all__ = [
    "ObjectType",
    "ParsedObject",
    "TreeEntry",
    "decode_tree_entries",
    "decompress",
    "format_tree",
    "parse_object",
    "read_object",
]
