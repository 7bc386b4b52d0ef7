import pytest

from aocpuzzles.scaffold import PLACEHOLDER, main, replace_module_name, scaffold


def _make_templates(base):
    templates = base / ".templates"
    (templates / "src").mkdir(parents=True)
    (templates / "pyproject.toml").write_text(f'name = "{PLACEHOLDER}"\n', encoding="utf-8")
    (templates / "src" / "solution.py").write_text("def part_one(text):\n    return None\n", encoding="utf-8")
    return templates


def test_replace_module_name(tmp_path):
    path = tmp_path / "manifest.toml"
    path.write_text(f"a = {PLACEHOLDER}\nb = {PLACEHOLDER}\n", encoding="utf-8")
    replace_module_name(path, "day_2022_03")
    assert path.read_text(encoding="utf-8") == "a = day_2022_03\nb = day_2022_03\n"


def test_scaffold_copies_and_renames(tmp_path):
    templates = _make_templates(tmp_path)
    module_path = scaffold(5, 2022, templates, tmp_path)
    assert module_path == tmp_path / "2022" / "day_05"
    manifest = (module_path / "pyproject.toml").read_text(encoding="utf-8")
    assert manifest == 'name = "day_2022_05"\n'
    copied = (module_path / "src" / "solution.py").read_text(encoding="utf-8")
    assert copied == (templates / "src" / "solution.py").read_text(encoding="utf-8")


def test_scaffold_refuses_existing_destination(tmp_path):
    templates = _make_templates(tmp_path)
    scaffold(1, 2022, templates, tmp_path)
    with pytest.raises(FileExistsError, match="already exists"):
        scaffold(1, 2022, templates, tmp_path)


def test_main_bad_arguments(capsys):
    assert main([]) == 1
    assert "Failed to process arguments" in capsys.readouterr().err


def test_main_creates_then_rejects(tmp_path, monkeypatch):
    _make_templates(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(["9", "--year", "2021"]) == 0
    assert (tmp_path / "2021" / "day_09" / "src" / "solution.py").is_file()
    assert main(["9", "-y", "2021"]) == 1