"""Tests for reducer and pipeline configuration."""

import pytest
from pydantic import ValidationError

from ledger_reducers.core.config import PipelineConfig, ReducerConfig
from ledger_reducers.core.types import AddressMode


class TestReducerConfig:

    def test_camel_case_names(self):
        config = ReducerConfig.model_validate({"addressType": "stake", "prefix": "p", "onDecodeError": "lenient"})
        assert config.address_type is AddressMode.STAKE
        assert not config.strict
        assert config.resolved_backend == "crdt"

    def test_defaults_to_strict(self):
        assert ReducerConfig(addressType="payment").strict

    def test_relational_requires_table(self):
        with pytest.raises(ValidationError, match="requires a table"):
            ReducerConfig(addressType="payment", backend="relational")

    def test_table_implies_relational(self):
        assert ReducerConfig(addressType="payment", table="balances").resolved_backend == "relational"

    @pytest.mark.parametrize("table", ["balances; DROP TABLE x", "bad-name", "a.b.c"])
    def test_table_must_be_identifier(self, table):
        with pytest.raises(ValidationError):
            ReducerConfig(addressType="payment", table=table)

    def test_unknown_address_type(self):
        with pytest.raises(ValidationError):
            ReducerConfig(addressType="script")

    def test_unknown_option(self):
        with pytest.raises(ValidationError):
            ReducerConfig(addressType="payment", keyPrefix="x")


class TestPipelineConfig:

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "reducers.yaml"
        path.write_text(
            "log_level: DEBUG\n"
            "reducers:\n"
            "  - name: BalanceByAddress\n"
            "    config: {addressType: payment, prefix: balance_by_address}\n"
            "  - name: BalanceByAddress\n"
            "    config: {addressType: stake, table: balance_by_stake_address}\n"
        )
        config = PipelineConfig.from_yaml(path)
        assert config.log_level == "DEBUG"
        assert [r.config.resolved_backend for r in config.reducers] == ["crdt", "relational"]

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "reducers.yaml"
        path.write_text("")
        assert PipelineConfig.from_yaml(path).reducers == []

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LEDGER_REDUCERS_LOG_LEVEL", "ERROR")
        assert PipelineConfig().log_level == "ERROR"
