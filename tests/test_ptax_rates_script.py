from __future__ import annotations

import logging
import runpy
from datetime import date

import pytest

from fx_ptax import FxPtax
from fx_ptax.cache import RateSetCache
from fx_ptax.scripts import ptax_rates

BODY = """{day};220;A;USD;5,00000000;5,10000000;1,00000000;1,00000000
{day};978;B;EUR;6,00000000;6,12000000;1,20000000;1,20000000
"""


@pytest.fixture
def client(make_feed) -> FxPtax:
    today = date.today()
    return FxPtax(make_feed({today: BODY.format(day=today.strftime("%d/%m/%Y"))}), cache=RateSetCache())


def test_parse_args_defaults() -> None:
    args = ptax_rates.parse_args(["convert", "100", "usd", "brl"])

    assert args.command == "convert"
    assert args.amount == 100.0
    assert args.rate_kind == "sell"
    assert args.max_retries == 5
    assert args.timeout == 10_000


def test_rates_command_prints_resolved_date(client, capsys) -> None:
    assert ptax_rates.main(["rates"], client=client) == 0

    out = capsys.readouterr().out
    assert f"PTAX rates for {date.today().isoformat()}" in out
    assert "USD" in out and "EUR" in out


def test_currencies_and_rate_commands(client, capsys) -> None:
    assert ptax_rates.main(["currencies"], client=client) == 0
    assert capsys.readouterr().out.split() == ["EUR", "USD"]

    assert ptax_rates.main(["rate", "usd"], client=client) == 0
    assert "sell=5.1000" in capsys.readouterr().out


def test_convert_command(client, capsys) -> None:
    assert ptax_rates.main(["convert", "100", "USD", "BRL", "--rate-kind", "buy"], client=client) == 0

    assert "= 500.0000 BRL" in capsys.readouterr().out


def test_errors_exit_with_status_one(client, capsys) -> None:
    assert ptax_rates.main(["rate", "XYZ"], client=client) == 1

    assert "Currency not found: XYZ" in capsys.readouterr().err


def test_invalid_options_exit_with_status_two(client, capsys) -> None:
    assert ptax_rates.main(["--max-retries", "0", "currencies"], client=client) == 2

    assert "max_retries" in capsys.readouterr().err


def test_package_entry_point_invokes_main(monkeypatch) -> None:
    called = {"value": False}

    def _fake_main() -> int:
        called["value"] = True
        return 0

    monkeypatch.setattr(ptax_rates, "main", _fake_main)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("fx_ptax", run_name="__main__")

    assert excinfo.value.code == 0
    assert called["value"] is True


def test_rates_command_walks_back_from_given_date(make_feed, capsys) -> None:
    friday = date(2025, 12, 12)
    client = FxPtax(make_feed({friday: BODY.format(day="12/12/2025")}), cache=RateSetCache())

    assert ptax_rates.main(["rates", "--date", "2025-12-14"], client=client) == 0

    assert "PTAX rates for 2025-12-12" in capsys.readouterr().out


def test_data_unavailable_is_reported_once(make_feed, capsys, caplog) -> None:
    client = FxPtax(make_feed(), cache=RateSetCache())

    with caplog.at_level(logging.WARNING, logger="fx_ptax"):
        assert ptax_rates.main(["--max-retries", "2", "currencies"], client=client) == 1

    err_lines = capsys.readouterr().err.strip().splitlines()
    assert err_lines == ["error: No PTAX data available in the last 2 days"]
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
