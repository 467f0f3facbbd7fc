"""Tests for the command line tool"""

import json

import pytest
from click.testing import CliRunner

from sectioncms.cli import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("SECTIONCMS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SECTIONCMS_LOG_LEVEL", "ERROR")
    return CliRunner()


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestTypes:
    def test_lists_every_section_type(self, runner):
        result = runner.invoke(cli, ["types"], obj={})

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 23
        assert "hero\tHero Section\tlayout" in lines


class TestDefaults:
    def test_prints_default_data(self, runner):
        result = runner.invoke(cli, ["defaults", "hero"], obj={})

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["title"] == ""
        assert data["stats"] == []
        assert data["cta"]["show"] is True

    def test_unknown_type(self, runner):
        result = runner.invoke(cli, ["defaults", "nope"], obj={})

        assert result.exit_code == 1
        assert "Unknown section type: nope" in result.output


class TestNormalize:
    def test_repairs_data(self, runner, tmp_path):
        data_file = write_json(tmp_path / "gallery.json", {"images": "not-an-array"})

        result = runner.invoke(cli, ["normalize", "gallery", data_file], obj={})

        assert result.exit_code == 0
        assert '"images": []' in result.output

    def test_non_finite_numbers_become_zero(self, runner, tmp_path):
        data_file = tmp_path / "testimonials.json"
        data_file.write_text('{"testimonials": [{"rating": NaN}]}', encoding="utf-8")

        result = runner.invoke(cli, ["normalize", "testimonials", str(data_file)], obj={})

        assert result.exit_code == 0
        assert '"rating": 0' in result.output
        assert "NaN" not in result.output

    def test_invalid_json(self, runner, tmp_path):
        data_file = tmp_path / "broken.json"
        data_file.write_text("{not json", encoding="utf-8")

        result = runner.invoke(cli, ["normalize", "gallery", str(data_file)], obj={})

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output


class TestValidate:
    def test_valid_data(self, runner, tmp_path):
        data_file = write_json(tmp_path / "hero.json", {"title": "Hello"})

        result = runner.invoke(cli, ["validate", "hero", data_file], obj={})

        assert result.exit_code == 0
        assert "is valid hero data" in result.output

    def test_invalid_data(self, runner, tmp_path):
        data_file = write_json(tmp_path / "hero.json", {"title": ["not", "a", "string"]})

        result = runner.invoke(cli, ["validate", "hero", data_file], obj={})

        assert result.exit_code == 1
        assert "is not valid hero data" in result.output


class TestForm:
    def test_new_section_form(self, runner):
        result = runner.invoke(cli, ["form", "hero"], obj={})

        assert result.exit_code == 0
        form = json.loads(result.output)
        assert form["type_id"] == "hero"
        assert form["groups"][0]["id"] == "content"

    def test_unknown_type_with_data_is_read_only(self, runner, tmp_path):
        data_file = write_json(tmp_path / "old.json", {"headline": "Old"})

        result = runner.invoke(cli, ["form", "retired-banner", "--data", data_file], obj={})

        assert result.exit_code == 0
        assert '"fallback"' in result.output
        assert "headline" in result.output

    def test_unknown_type_without_data(self, runner):
        result = runner.invoke(cli, ["form", "retired-banner"], obj={})
        assert result.exit_code == 1


def test_invalid_config_file(runner, tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[web]\nport = 0\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config_file), "types"], obj={})

    assert result.exit_code == 1
    assert "web -> port" in result.output
