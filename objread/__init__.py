from objread.errors import (
    DecompressionError,
    MalformedHeaderError,
    MalformedTreeError,
    ObjectReadError,
)
from objread.formatting import format_object, render_report
from objread.hexdump import hex_dump
from objread.models import (
    ObjectType,
    ParsedObject,
    TreeEntry,
    decode_tree_entries,
    decompress,
    parse_object,
    read_object,
)

__version__ = "0.1.0"
