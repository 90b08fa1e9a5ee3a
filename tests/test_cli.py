import json

from amplience_schema.cli import app

from conftest import SDL


def write_project(tmp_path, sdl=SDL):
    schema_path = tmp_path / "schema.graphql"
    schema_path.write_text(sdl)
    config_path = tmp_path / "amplience.yaml"
    config_path.write_text("schemaHost: https://schema.example.com\n")
    return schema_path, config_path


class TestInit:
    """amplience-schema init"""

    def test_creates_config(self, tmp_path):
        config_path = tmp_path / "amplience.yaml"
        assert app(["init", "--config", str(config_path), "--schema-host", "https://h"]) == 0
        assert "schemaHost: https://h" in config_path.read_text()

    def test_refuses_to_overwrite(self, tmp_path):
        config_path = tmp_path / "amplience.yaml"
        config_path.write_text("schemaHost: https://old\n")
        assert app(["init", "--config", str(config_path)]) == 1
        assert app(["init", "--config", str(config_path), "--force"]) == 0


class TestGenerateCommand:
    """amplience-schema generate"""

    def test_writes_files(self, tmp_path):
        schema_path, config_path = write_project(tmp_path)
        output = tmp_path / "out"
        assert app(["generate", str(schema_path), "--config", str(config_path), "--output", str(output)]) == 0

        settings = json.loads((output / "content-types" / "article.json").read_text())
        assert settings["contentTypeUri"] == "https://schema.example.com/article"
        assert (output / "content-type-schemas" / "schemas" / "banner-schema.json").exists()

    def test_dry_run(self, tmp_path, capsys):
        schema_path, config_path = write_project(tmp_path)
        output = tmp_path / "out"
        args = ["generate", str(schema_path), "--config", str(config_path), "--output", str(output), "--dry-run"]
        assert app(args) == 0
        assert not output.exists()
        assert "Would write" in capsys.readouterr().out

    def test_missing_config(self, tmp_path):
        schema_path, _ = write_project(tmp_path)
        assert app(["generate", str(schema_path), "--config", str(tmp_path / "missing.yaml")]) == 1

    def test_configuration_error(self, tmp_path, capsys):
        fields = " ".join(f"f{i}: String @filterable" for i in range(6))
        schema_path, config_path = write_project(tmp_path, f"type T @amplienceContentType {{ {fields} }}")
        args = ["generate", str(schema_path), "--config", str(config_path), "--output", str(tmp_path / "out")]
        assert app(args) == 1
        assert "Error:" in capsys.readouterr().out

    def test_no_command(self):
        assert app([]) == 0

    def test_invalid_schema(self, tmp_path, capsys):
        schema_path, config_path = write_project(tmp_path, "type T @amplienceContentType { a: String @unknownDirective }")
        args = ["generate", str(schema_path), "--config", str(config_path), "--output", str(tmp_path / "out")]
        assert app(args) == 1
        assert "Error:" in capsys.readouterr().out
