# -*- coding: utf-8 -*-

import json

from vatbot.cli import main


def test_json_output_no_llm(capsys) -> None:
    assert main(["--no-llm", "--json", "+1000 eur з ПДВ"]) == 0

    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["status"] == "ok"
    entry = payload["entries"][0]
    assert entry["gross"] == "1000.00"
    assert entry["vat"] == "166.67"
    assert entry["net"] == "833.33"
    assert payload["month"]["income_vat"] == "166.67"


def test_messages_share_one_session(capsys) -> None:
    assert main(["--no-llm", "+1200 site", "-240 laptop", "/vatyear"]) == 0

    out = capsys.readouterr().out
    assert "рік: 160.00" in out


def test_no_entries(capsys) -> None:
    assert main(["--no-llm", "--json", "hello"]) == 0
    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["status"] == "no_entries"
