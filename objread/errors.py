__all__ = [
    "ObjectReadError",
    "DecompressionError",
    "MalformedHeaderError",
    "MalformedTreeError",
]


class ObjectReadError(Exception):
    """Base class for fatal errors while reading an object."""

    stage = "read"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self):
        return f"{self.stage}: {self.reason}"


class DecompressionError(ObjectReadError):
    stage = "decompress"


class MalformedHeaderError(ObjectReadError):
    stage = "header"


class MalformedTreeError(ObjectReadError):
    stage = "tree"
