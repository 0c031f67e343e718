from typer.testing import CliRunner

from libranet.cli import app

runner = CliRunner()


def test_catalog_lists_seeded_items():
    result = runner.invoke(app, ["catalog"])
    assert result.exit_code == 0
    assert "[Book] ID: 110" in result.output
    assert "[E-Magazine] ID: 310" in result.output


def test_demo_runs_full_scenario():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "Added 'The 3 Mistakes of My Life' to the library." in result.output
    assert "A fine of Rs 50.00 is due for the late return of" in result.output
    assert "Error: 'Harry Potter and the Prisoner of Azkaban' is not currently borrowed." in result.output
    assert "(Overdue)" in result.output


def test_demo_fine_rate_option():
    result = runner.invoke(app, ["demo", "--fine-rate", "2"])
    assert result.exit_code == 0
    assert "A fine of Rs 10.00" in result.output
