"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from fulfilment.infrastructure.cli.main import cli
from fulfilment.logging_config import reset_logging


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("FULFILMENT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FULFILMENT_LOG_LEVEL", "ERROR")
    reset_logging()
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, list(args))

    yield _run
    reset_logging()


def _seed(run):
    assert run("product", "add", "--name", "Widget", "--price", "15.00", "--stock", "100").exit_code == 0
    assert run("store", "create", "--name", "Downtown").exit_code == 0
    assert run(
        "warehouse", "create", "--code", "MWH.001", "--location", "AMSTERDAM-001", "--capacity", "20"
    ).exit_code == 0


class TestProductCommands:

    def test_add_and_list(self, run):
        result = run("product", "add", "--name", "Widget", "--price", "15", "--stock", "5")
        assert result.exit_code == 0
        assert "Product #1 'Widget' added at 15.00 EUR" in result.output

        listed = run("product", "list")
        assert "Widget" in listed.output
        assert "15.00 EUR" in listed.output

    def test_empty_list(self, run):
        assert "No products found." in run("product", "list").output

    def test_delete_unknown_is_an_error(self, run):
        result = run("product", "delete", "--id", "9")
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_show(self, run):
        run("product", "add", "--name", "Widget", "--price", "15", "--stock", "5")

        result = run("product", "show", "--id", "1")

        assert result.exit_code == 0
        assert "Product #1: Widget" in result.output
        assert "Available:   5" in result.output

    def test_show_unknown_is_an_error(self, run):
        result = run("product", "show", "--id", "9")
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestAllocationCommands:

    def test_set_list_remove(self, run):
        _seed(run)

        result = run("allocation", "set", "--warehouse", "MWH.001", "--product", "1", "--quantity", "12")
        assert result.exit_code == 0
        assert "12 x 'Widget' allocated to warehouse 'MWH.001'" in result.output

        listed = run("allocation", "list", "--warehouse", "MWH.001")
        assert "Widget" in listed.output

        removed = run("allocation", "remove", "--warehouse", "MWH.001", "--product", "1")
        assert "12 units returned" in removed.output

    def test_capacity_breach_reported(self, run):
        _seed(run)
        result = run("allocation", "set", "--warehouse", "MWH.001", "--product", "1", "--quantity", "25")

        assert result.exit_code == 1
        assert "exceeds capacity" in result.output

    def test_container_must_be_given_once(self, run):
        result = run("allocation", "list", "--store", "1", "--warehouse", "MWH.001")
        assert result.exit_code == 2
        assert "exactly one of --store or --warehouse" in result.output

    def test_store_allocation(self, run):
        _seed(run)
        run("allocation", "set", "--store", "1", "--product", "1", "--quantity", "3")

        listed = run("store", "list")
        assert "DERIVED" in listed.output

        shown = run("store", "show", "--id", "1")
        assert shown.exit_code == 0
        assert "Store #1: Downtown" in shown.output
        assert "Occupancy: 3 (DERIVED)" in shown.output


class TestWarehouseCommands:

    def test_show_after_replace_and_archive(self, run):
        _seed(run)

        replaced = run(
            "warehouse", "replace", "--code", "MWH.001", "--location", "ZWOLLE-001",
            "--capacity", "30", "--expected-version", "0",
        )
        assert "version=1" in replaced.output

        stale = run("warehouse", "archive", "--code", "MWH.001", "--expected-version", "0")
        assert stale.exit_code == 1
        assert "modified by another request" in stale.output

        assert run("warehouse", "archive", "--code", "MWH.001").exit_code == 0
        shown = run("warehouse", "show", "--code", "MWH.001")
        assert "status=ARCHIVED" in shown.output
        assert "Archived:" in shown.output

    def test_invalid_location_reported(self, run):
        result = run("warehouse", "create", "--code", "X", "--location", "MARS-001", "--capacity", "5")
        assert result.exit_code == 1
        assert "is not valid" in result.output

    def test_search(self, run):
        run("warehouse", "create", "--code", "SMALL", "--location", "AMSTERDAM-001", "--capacity", "10")
        run("warehouse", "create", "--code", "LARGE", "--location", "AMSTERDAM-001", "--capacity", "60")

        result = run("warehouse", "search", "--sort-by", "capacity", "--sort-order", "desc", "--page-size", "1")

        assert "LARGE" in result.output
        assert "SMALL" not in result.output

    def test_search_rejects_bad_sort(self, run):
        result = run("warehouse", "search", "--sort-by", "name")
        assert result.exit_code == 1
        assert "sortBy must be either" in result.output
