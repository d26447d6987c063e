import json

import pytest

from taxplanner.main import main


def test_corporate_command_json(capsys):
    main(["corporate", "--profit", "600000", "--json"])
    body = json.loads(capsys.readouterr().out)
    assert body["corporate_taxes"] == "82000.00"


def test_unincorporated_command_json(capsys):
    main(["unincorporated", "--income", "150000", "--json"])
    body = json.loads(capsys.readouterr().out)
    assert body["personal_cash"] == "105130.93"


def test_compare_table_names_best_structure(capsys):
    main(["--income", "150000", "--cash-needed", "100000", "--no-color"])
    out = capsys.readouterr().out
    assert "Lowest taxes + CPP:" in out
    assert "Highest total cash:" in out


def test_capped_dividends_print_a_note(capsys):
    main(["dividends", "--income", "50000", "--cash-needed", "100000", "--no-color"])
    assert "NOTE:" in capsys.readouterr().out


def test_invalid_amount_exits_with_status_1(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["salary", "--income", "lots", "--no-color"])
    assert exc.value.code == 1
    assert "problem with the values" in capsys.readouterr().out
