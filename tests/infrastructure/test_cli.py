"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    yield _run
    bootstrap.configure(None)


def _stored(tmp_path) -> list[dict]:
    return json.loads((tmp_path / "products.json").read_text())


class TestProductCommands:

    def test_add_and_list(self, run):
        result = run("product", "add", "--name", "Foo Bar", "--price", "19.99", "--on-hand", "7")
        assert result.exit_code == 0, result.output
        assert "(foo-bar)" in result.output
        assert "on hand 7" in result.output

        result = run("product", "list")
        assert "Foo Bar" in result.output

    def test_add_writes_seven_units(self, run, tmp_path):
        run("product", "add", "--name", "Foo Bar", "--price", "19.99", "--on-hand", "7")
        units = _stored(tmp_path)[0]["master"]["inventory_units"]
        assert len(units) == 7
        assert {u["state"] for u in units} == {"on_hand"}

    def test_show_unknown_product_fails(self, run):
        result = run("product", "show", "--id", "missing")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_delete_hides_from_default_list(self, run):
        run("product", "add", "--name", "Foo Bar", "--price", "1")
        assert run("product", "delete", "--id", "foo-bar").exit_code == 0
        assert "No products found." in run("product", "list").output
        assert "Foo Bar" in run("product", "list", "--scope", "all").output

    def test_categories_round_trip(self, run, tmp_path):
        run("product", "add", "--name", "Tee", "--price", "10", "--tax-category", "clothing")
        result = run("product", "update", "--id", "tee", "--shipping-category", "default")
        assert result.exit_code == 0, result.output
        stored = _stored(tmp_path)[0]
        assert stored["tax_category_id"] == "clothing"
        assert stored["shipping_category_id"] == "default"
        assert "Shipping cat.: default" in run("product", "show", "--id", "tee").output

    def test_non_finite_weight_fails_cleanly(self, run):
        result = run("product", "add", "--name", "X", "--price", "1", "--weight", "nan")
        assert result.exit_code != 0
        assert "Invalid weight" in result.output


class TestVariantCommands:

    def test_remove_variant(self, run, tmp_path):
        run("product", "add", "--name", "Tee", "--price", "10")
        run("variant", "add", "--product", "tee", "--options", "Size:M", "--on-hand", "2")
        variant_id = _stored(tmp_path)[0]["variants"][0]["id"]
        result = run("variant", "remove", "--variant", variant_id)
        assert result.exit_code == 0, result.output
        assert "on hand 0" in result.output
        assert _stored(tmp_path)[0]["variants"] == []

    def test_remove_master_fails(self, run, tmp_path):
        run("product", "add", "--name", "Tee", "--price", "10")
        master_id = _stored(tmp_path)[0]["master"]["id"]
        result = run("variant", "remove", "--variant", master_id)
        assert result.exit_code != 0
        assert "master variant cannot be removed" in result.output


class TestInventoryCommands:

    def test_set_on_product(self, run):
        run("product", "add", "--name", "Foo Bar", "--price", "1", "--on-hand", "1")
        result = run("inventory", "set", "--product", "1", "--quantity", "5")
        assert result.exit_code == 0, result.output
        assert "created 4" in result.output
        assert "now has 5 on hand" in result.output

    def test_set_on_product_with_variants_fails(self, run):
        run("product", "add", "--name", "Tee", "--price", "10")
        run("variant", "add", "--product", "tee", "--options", "Size:M")
        result = run("inventory", "set", "--product", "tee", "--quantity", "5")
        assert result.exit_code != 0
        assert "specific variant" in result.output

    def test_set_on_variant(self, run, tmp_path):
        run("product", "add", "--name", "Tee", "--price", "10", "--on-hand", "3")
        run("variant", "add", "--product", "tee", "--options", "Size:M")
        variant_id = _stored(tmp_path)[0]["variants"][0]["id"]
        result = run("inventory", "set", "--variant", variant_id, "--quantity", "2")
        assert result.exit_code == 0, result.output
        assert "now has 2 on hand" in result.output
        assert _stored(tmp_path)[0]["master"]["inventory_units"] == []

    def test_set_requires_a_target(self, run):
        result = run("inventory", "set", "--quantity", "2")
        assert result.exit_code != 0

    def test_show(self, run):
        run("product", "add", "--name", "Foo Bar", "--price", "1", "--on-hand", "2")
        result = run("inventory", "show")
        assert "Foo Bar" in result.output
        assert "master" in result.output


class TestPrototypeCommands:

    def test_product_from_prototype(self, run, tmp_path):
        result = run("prototype", "add", "--name", "Shirt", "--properties", "Material", "--option-types", "Size")
        assert result.exit_code == 0, result.output
        run("product", "add", "--name", "Tee", "--price", "10", "--prototype", "1")
        stored = _stored(tmp_path)[0]
        assert stored["properties"] == {"Material": ""}
        assert stored["option_types"] == ["Size"]
