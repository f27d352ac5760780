import pytest

import main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.setattr(main, "load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr(main, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")
    for name in (
        "CATALOGUE_CONFIG",
        "CATALOGUE_LOG_LEVEL",
        "CATALOGUE_JSON_LOGS",
        "CATALOGUE_LOG_FILE",
        "CATALOGUE_VERBOSE",
        "CATALOGUE_CATEGORIES",
    ):
        monkeypatch.delenv(name, raising=False)


def test_list_by_category(capsys):
    assert main.main(["list", "--category", "creational"]) == 0
    out = capsys.readouterr().out
    assert "Creational patterns:" in out
    assert "singleton" in out
    assert "Structural patterns:" not in out


def test_list_unknown_category(capsys):
    assert main.main(["list", "--category", "functional"]) == 1
    assert "Unknown category" in capsys.readouterr().err


def test_show(capsys):
    assert main.main(["show", "abstract factory"]) == 0
    assert "Abstract Factory (creational)" in capsys.readouterr().out


def test_run_verbose(capsys):
    assert main.main(["run", "proxy", "-v"]) == 0
    out = capsys.readouterr().out
    assert "[Proxy]" in out
    assert '"adult_driver": "car is driving"' in out


def test_run_unknown_pattern(capsys):
    assert main.main(["run", "monad"]) == 1
    assert "not found" in capsys.readouterr().err


def test_run_all_category(capsys):
    assert main.main(["run-all", "--category", "behavioural"]) == 0
    out = capsys.readouterr().out
    assert "template_method:" in out
    assert "builder:" not in out


def test_config_file_and_env(tmp_path, monkeypatch, capsys):
    path = tmp_path / "catalogue.yaml"
    path.write_text("enabled_categories: [structural]\n", encoding="utf-8")
    monkeypatch.setenv("CATALOGUE_CONFIG", str(path))

    assert main.main(["run", "builder"]) == 1
    assert main.main(["run", "bridge"]) == 0


def test_missing_config_file(tmp_path):
    assert main.main(["--config", str(tmp_path / "nope.yaml"), "list"]) == 1


def test_interactive_menu(monkeypatch, capsys):
    answers = iter(["1", "2", "observer", "x", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "Design Pattern Catalogue" in out
    assert "Observer (behavioural)" in out
    assert "Invalid choice" in out
    assert "Goodbye!" in out
