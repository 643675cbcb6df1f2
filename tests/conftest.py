import zlib

import pytest


def build_raw(obj_type: str, body: bytes, size: int | None = None) -> bytes:
    if size is None:
        size = len(body)
    return f"{obj_type} {size}".encode() + b"\x00" + body


def build_tree(entries) -> bytes:
    return b"".join(
        f"{mode} {name}".encode() + b"\x00" + raw_hash
        for mode, name, raw_hash in entries
    )


@pytest.fixture
def make_object():
    def _make_object(obj_type: str, body: bytes, *, size: int | None = None):
        return zlib.compress(build_raw(obj_type, body, size))

    return _make_object


@pytest.fixture
def id1():
    # NUL inside the id must not be taken for a record separator
    return bytes(range(20))


@pytest.fixture
def id2():
    return b" " * 10 + b"\x00" * 5 + b"\xff" * 5
