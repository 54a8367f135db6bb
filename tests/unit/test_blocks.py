"""
Block Adapter Unit Tests
Tests for hashtree/merkle/blocks.py and hashtree/schemas/canonical.py
"""
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from hashtree.merkle.blocks import Block, CanonicalData, StringData, to_block_bytes
from hashtree.schemas.canonical import dumps_canonical
from hashtree.schemas.errors import CanonicalizationException, InvalidBlockException


class Entry(BaseModel):
    name: str
    size: int
    note: str | None = None


@dataclass
class RawRecord:
    payload: bytes

    def to_bytes(self) -> bytes:
        return b"rec:" + self.payload


class BrokenRecord:
    def to_bytes(self):
        return "not bytes"


class TestToBlockBytes:
    """Tests for to_block_bytes()."""

    def test_bytes_pass_through(self):
        data = b"abc"

        assert to_block_bytes(data) is data

    def test_bytearray_and_memoryview(self):
        assert to_block_bytes(bytearray(b"ab")) == b"ab"
        assert to_block_bytes(memoryview(b"ab")) == b"ab"

    def test_custom_block(self):
        record = RawRecord(b"x")

        assert isinstance(record, Block)
        assert to_block_bytes(record) == b"rec:x"

    def test_block_returning_non_bytes(self):
        with pytest.raises(InvalidBlockException):
            to_block_bytes(BrokenRecord())

    def test_str_rejected_with_hint(self):
        with pytest.raises(InvalidBlockException, match="StringData"):
            to_block_bytes("text")

    @pytest.mark.parametrize("value", [1, True, 2.5, None, ["a"]])
    def test_other_types_rejected(self, value):
        with pytest.raises(InvalidBlockException):
            to_block_bytes(value)


class TestStringData:
    """Tests for StringData."""

    def test_utf8_default(self):
        assert StringData("ü").to_bytes() == "ü".encode("utf-8")

    def test_explicit_encoding(self):
        assert StringData("ü", encoding="latin-1").to_bytes() == b"\xfc"


class TestCanonicalData:
    """Tests for CanonicalData and the canonical JSON it relies on."""

    def test_sorted_compact(self):
        assert CanonicalData({"b": 1, "a": [1, 2]}).to_bytes() == b'{"a":[1,2],"b":1}'

    def test_none_is_null(self):
        assert dumps_canonical({"a": None, "b": 1}) == '{"a":null,"b":1}'

    def test_pydantic_model(self):
        assert dumps_canonical(Entry(name="f", size=3)) == '{"name":"f","note":null,"size":3}'

    def test_equal_to_dict_form(self):
        entry = Entry(name="f", size=3, note="n")

        assert CanonicalData(entry).to_bytes() == CanonicalData({"size": 3, "note": "n", "name": "f"}).to_bytes()

    def test_bytes_as_hex(self):
        assert dumps_canonical({"d": b"\x01\xff", "t": (1, 2.5)}) == '{"d":"01ff","t":[1,2.5]}'

    def test_non_ascii_kept(self):
        assert CanonicalData({"k": "é"}).to_bytes() == '{"k":"é"}'.encode("utf-8")

    def test_infinite_float_rejected(self):
        with pytest.raises(CanonicalizationException):
            CanonicalData({"x": float("inf")}).to_bytes()

    def test_unsupported_type_rejected(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({"x": object()})

    def test_non_str_key_rejected(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({1: "a"})

    def test_nested_nan_rejected_with_path(self):
        with pytest.raises(CanonicalizationException) as exc_info:
            dumps_canonical({"outer": [1.0, float("nan")]})

        assert exc_info.value.details["path"] == "outer[1]"
