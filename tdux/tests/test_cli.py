"""
Tests for the tdux command-line demo.
"""

import json

from typer.testing import CliRunner

from cli.commands.demo import ModalApp
from cli.main import app
from tdux.core import ShouldEvent

runner = CliRunner()


def test_demo_json_output():
    result = runner.invoke(app, ["demo", "-a", "OPEN", "-a", "CLOSE", "--id", "7", "--json"])

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["events"] == [
        {"action": "OPEN", "id": 7, "value": True, "previous_value": False},
        {"action": "CLOSE", "id": 7, "value": False, "previous_value": True},
    ]
    assert output["store"] == {"7": False}


def test_demo_unknown_action_exits_2():
    result = runner.invoke(app, ["demo", "-a", "OPEN", "-a", "RESIZE", "--json"])

    assert result.exit_code == 2
    output = json.loads(result.stdout)
    assert "RESIZE" in output["error"]
    assert len(output["events"]) == 1


def test_demo_table_output():
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "Did Events" in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "tdux" in result.stdout


def test_modal_app_reducers_share_store():
    store = {1: False}
    modal = ModalApp(store)
    got = []
    modal.on("OPEN").subscribe(got.append)

    modal.dispatch("OPEN", ShouldEvent(id=1, value=True))

    assert store[1] is True
    assert got[0].previous_value is False


def test_demo_action_name_with_markup_characters():
    """Bracketed action names are printed literally and still exit 2."""
    result = runner.invoke(app, ["demo", "-a", "[/x]"])

    assert result.exit_code == 2
    assert "Error:" in result.stdout
    assert "[/X]" in result.stdout
