"""
Test the command line
"""
import json
import sys
from pathlib import Path

import pytest

from contract_deployer.__main__ import load_config_file, main, parse_args


def _standard_target(tmp_path: Path) -> str:
    target = tmp_path / "contracts.json"
    target.write_text(
        json.dumps(
            {
                "A": {"abi": [], "bytecode": "6001__B_____6002"},
                "B": {"abi": [], "bytecode": "6060"},
            }
        ),
        encoding="utf8",
    )
    return target.as_posix()


def test_print_order(tmp_path: Path, monkeypatch, capsys) -> None:
    """Planning does not need a node"""
    config_file = (tmp_path / "missing.config.json").as_posix()
    monkeypatch.setattr(
        sys,
        "argv",
        ["contract-deployer", _standard_target(tmp_path), "--print-order", "--config-file", config_file],
    )
    main()
    assert capsys.readouterr().out == "0: B\n1: A\n"


def test_cycle_exits(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "contracts.json"
    target.write_text(
        json.dumps(
            {
                "A": {"abi": [], "bytecode": "60__B____"},
                "B": {"abi": [], "bytecode": "60__A____"},
            }
        ),
        encoding="utf8",
    )
    monkeypatch.setattr(sys, "argv", ["contract-deployer", target.as_posix(), "--print-order"])
    with pytest.raises(SystemExit) as error:
        main()
    assert error.value.code == -1


def test_config_file(tmp_path: Path, monkeypatch) -> None:
    """Config file values apply to the flags left to their default"""
    config_file = tmp_path / "deployer.json"
    config_file.write_text(
        json.dumps(
            {
                "gasLimit": 5000,
                "deployedContracts": {"B": "0x01"},
                "export_dir": "from-config",
                "unknown": True,
            }
        ),
        encoding="utf8",
    )
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "contract-deployer",
            "contracts.json",
            "--config-file",
            config_file.as_posix(),
            "--export-dir",
            "from-cli",
            "--constructor-params",
            '{"A": [1]}',
        ],
    )
    args = parse_args()
    assert args.gas_limit == 5000
    assert args.deployed_contracts == {"B": "0x01"}
    assert args.constructor_params == {"A": [1]}
    assert args.export_dir == "from-cli"
    assert not hasattr(args, "unknown")


def test_invalid_config_file(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "deployer.json"
    config_file.write_text("{", encoding="utf8")
    monkeypatch.setattr(
        sys, "argv", ["contract-deployer", "contracts.json", "--config-file", config_file.as_posix()]
    )
    args = parse_args()
    load_config_file(args)
    assert args.gas_limit is None
