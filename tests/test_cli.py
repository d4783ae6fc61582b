import json

from netjson.cli import app


def test_cli_help(runner):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Net-JSON" in result.stdout


def test_cli_parse_netlist(runner, sample_netlist_file):
    result = runner.invoke(app, ["--quiet", "parse", str(sample_netlist_file)])
    assert result.exit_code == 0
    assert "Netlist Summary" in result.stdout
    assert "Yosys" in result.stdout
    assert "counter" in result.stdout
    assert "Warning" not in result.stdout


def test_cli_parse_not_found(runner):
    result = runner.invoke(app, ["parse", "nonexistent.json"])
    assert result.exit_code == 1
    assert "File not found" in result.stdout


def test_cli_parse_invalid_netlist(runner, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"creator":"t","modules":{"m":{"ports":{"p":{"direction":"input","bits":["Q"]}}}}}')

    result = runner.invoke(app, ["--quiet", "parse", str(bad)])
    assert result.exit_code == 1
    assert "Invalid netlist" in result.stdout


def test_cli_parse_reports_warnings(runner, tmp_path):
    path = tmp_path / "extra.json"
    path.write_text('{"creator":"t","modules":{"m":{}},"foo":1}')

    result = runner.invoke(app, ["--quiet", "parse", str(path)])
    assert result.exit_code == 0
    assert "Warning" in result.stdout
    assert "no ports" in result.stdout


def test_cli_parse_output(runner, sample_netlist_file, tmp_path):
    output_file = tmp_path / "roundtrip.json"
    result = runner.invoke(
        app,
        ["--quiet", "parse", str(sample_netlist_file), "--output", str(output_file), "--indent", "2"],
    )
    assert result.exit_code == 0
    assert "Saved to" in result.stdout
    assert output_file.exists()

    text = output_file.read_text()
    assert text.startswith('{\n  "creator"')
    data = json.loads(text)
    assert list(data["modules"]) == ["counter", "sub"]
    assert data["modules"]["counter"]["ports"]["q"]["bits"] == [4, 5]
