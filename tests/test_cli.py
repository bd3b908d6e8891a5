import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from inferkit import __version__, environment
from inferkit.cli import cli
from inferkit.errors import DependencyUnavailable
from inferkit.libraries import reset_libraries


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    monkeypatch.setattr(environment, "_CURRENT", None)
    reset_libraries()
    yield
    reset_libraries()


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_libraries_success(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["libraries"])
    assert result.exit_code == 0
    assert "bootstrap" in result.output
    assert "OK: 8 capabilities available" in result.output


@patch("inferkit.commands.libraries.load_libraries")
def test_libraries_failure(mock_load, cli_runner: CliRunner):
    mock_load.side_effect = DependencyUnavailable("bayesian", "scipy.stats", "not installed")
    result = cli_runner.invoke(cli, ["libraries"])
    assert result.exit_code == 1
    assert "bayesian" in result.output


def test_data_table(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["data"])
    assert result.exit_code == 0
    assert "Sample1_Data.Carbohydrate (n=20):" in result.output
    assert "Proporciones_Muestrales_30 (n=30):" in result.output
    assert "0.5828941" in result.output


def test_data_json_single_variable(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["data", "--variable", "Sample2_Data.Sugar.Total", "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert list(payload) == ["Sample2_Data.Sugar.Total"]
    assert len(payload["Sample2_Data.Sugar.Total"]) == 20


def test_data_unknown_variable(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["data", "--variable", "Data.Sodium"])
    assert result.exit_code != 0


def test_summary_all(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["summary"])
    assert result.exit_code == 0
    assert "Data.Protein" in result.output
    assert "Medias_Muestrales_30" in result.output
    assert "Sample1_Data.Sugar.Total" not in result.output


def test_bootstrap_success(cli_runner: CliRunner):
    args = ["bootstrap", "--variable", "Data.Major.Minerals.Magnesium", "--seed", "2023", "--replicates", "200"]
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["seed"] == 2023
    assert payload["n_resamples"] == 200
    assert payload["ci_lower"] <= payload["estimate"] <= payload["ci_upper"]

    again = cli_runner.invoke(cli, args)
    assert json.loads(again.output) == payload


def test_bootstrap_invalid_replicates(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["bootstrap", "--variable", "Data.Protein", "--replicates", "0"])
    assert result.exit_code == 1
    assert "bootstrap_replicate_count" in result.output


def test_bootstrap_invalid_confidence(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["bootstrap", "--variable", "Data.Protein", "--confidence-level", "1.5"])
    assert result.exit_code == 1
    assert "--confidence-level" in result.output
