import binascii
import logging
from dataclasses import dataclass

from objread.errors import MalformedTreeError

__all__ = ["TreeEntry", "decode_tree_entries", "format_tree"]

logger = logging.getLogger(__name__)

NULL_BYTE = b"\x00"
SPACE = b" "
RAW_HASH_SIZE = 20


@dataclass(frozen=True, kw_only=True)
class TreeEntry:
    mode: str
    name: str
    raw_hash: bytes

    @property
    def hash(self):
        return binascii.hexlify(self.raw_hash).decode()

    def __str__(self):
        return f"{self.mode} {self.hash}\t{self.name}"


def _split_info(info: bytes, offset: int) -> tuple[str, str]:
    mode, sep, name = info.partition(SPACE)
    if not sep:
        raise MalformedTreeError(f"no space in mode/name at offset {offset}: {info!r}")
    return mode.decode("ascii", "surrogateescape"), name.decode(
        "utf-8", "surrogateescape"
    )


def decode_tree_entries(content: bytes) -> list[TreeEntry]:
    """Decode a tree body into its entries, in stored order.

    Every record is ``<mode> <name>\\0`` followed by a 20 byte binary id, and
    records follow one another with nothing in between. The id bytes are
    skipped by offset, never scanned, since they may hold NUL or space.
    """
    entries = []
    pos, end = 0, len(content)
    while pos < end:
        nul = content.find(NULL_BYTE, pos)
        if nul == -1:
            raise MalformedTreeError(f"dangling record at offset {pos}: no NUL")
        hash_end = nul + 1 + RAW_HASH_SIZE
        if hash_end > end:
            raise MalformedTreeError(
                f"truncated object id at offset {nul + 1}: "
                f"{end - nul - 1} of {RAW_HASH_SIZE} bytes"
            )
        mode, name = _split_info(content[pos:nul], pos)
        entries.append(
            TreeEntry(mode=mode, name=name, raw_hash=content[nul + 1 : hash_end])
        )
        pos = hash_end
    logger.debug("decoded %d tree entries", len(entries))
    return entries


def format_tree(content: bytes) -> str:
    """Render a tree body as ``git ls-tree`` style rows."""
    return "\n".join(str(entry) for entry in decode_tree_entries(content))
