"""Tests for JSON block parsing."""

import base64
import json

import pytest

from ledger_reducers.core.errors import BlockFormatError
from ledger_reducers.data.block_json import load_block, parse_block

from factories import base_address

ADDR = base_address()


def b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode()


def block_doc(**overrides):
    doc = {
        "header": {"slot": "1234", "hash": "0x" + "ab" * 32, "height": 99},
        "body": {"tx": [{
            "hash": b64(b"\x01" * 32),
            "outputs": [{"address": b64(ADDR), "coin": "18446744073709551617"}],
            "inputs": [
                {"txHash": b64(b"\x02" * 32), "outputIndex": 1,
                 "asOutput": {"address": "0x" + ADDR.hex(), "coin": 5}},
                {"txHash": b64(b"\x03" * 32), "outputIndex": 0},
            ],
        }]},
    }
    doc.update(overrides)
    return doc


class TestParseBlock:

    def test_full_document(self):
        block = parse_block(block_doc())
        assert block.slot == 1234
        assert block.height == 99
        assert block.hash == b"\xab" * 32
        (tx,) = block.transactions
        assert tx.outputs[0].address == ADDR
        assert tx.outputs[0].coin == 2**64 + 1
        assert tx.inputs[0].as_output.coin == 5
        assert tx.inputs[0].as_output.address == ADDR
        assert tx.inputs[0].output_index == 1
        assert not tx.inputs[1].resolved

    def test_snake_case_fields(self):
        doc = {"body": {"tx": [{"inputs": [{"tx_hash": b64(b"\x01"), "as_output": {"address": b64(ADDR), "coin": 1}}]}]}}
        assert parse_block(doc).transactions[0].inputs[0].resolved

    def test_urlsafe_base64(self):
        raw = b"\xfb\xff" + ADDR
        doc = {"body": {"tx": [{"outputs": [{"address": base64.urlsafe_b64encode(raw).decode().rstrip("="), "coin": 1}]}]}}
        assert parse_block(doc).transactions[0].outputs[0].address == raw

    def test_missing_body_is_empty_block(self):
        block = parse_block({"header": {"slot": 1}})
        assert block.transactions == ()
        assert block.hash is None

    @pytest.mark.parametrize("doc", [
        [],
        {"body": {"tx": ["nope"]}},
        {"body": {"tx": [{"outputs": [{"address": b64(ADDR), "coin": -1}]}]}},
        {"body": {"tx": [{"outputs": [{"address": b64(ADDR), "coin": "ten"}]}]}},
        {"body": {"tx": [{"outputs": [{"address": "!!not base64!!", "coin": 1}]}]}},
        {"body": {"tx": [{"outputs": [{"address": 12, "coin": 1}]}]}},
    ])
    def test_rejects_malformed(self, doc):
        with pytest.raises(BlockFormatError):
            parse_block(doc)


class TestLoadBlock:

    def test_reads_file(self, tmp_path):
        path = tmp_path / "block.json"
        path.write_text(json.dumps(block_doc()))
        assert load_block(path).slot == 1234

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "block.json"
        path.write_text("{not json")
        with pytest.raises(BlockFormatError):
            load_block(path)
