from __future__ import annotations

import runpy

import pytest

from kurs_pricing import cli


def test_price_table_script_invokes_main(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {"value": False}

    def _fake_main() -> int:
        called["value"] = True
        return 0

    monkeypatch.setattr(cli, "main", _fake_main)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("kurs_pricing.scripts.price_table", run_name="__main__")

    assert called["value"] is True
    assert excinfo.value.code == 0
