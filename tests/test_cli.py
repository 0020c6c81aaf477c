import json
import logging

import pytest

from filetamer.cli import build_parser, list_command, load_config, main, run_command
from filetamer.config import Config, ConfigError


@pytest.fixture
def source(tmp_path):
    root = tmp_path / "source"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("alpha", encoding="utf-8")
    (root / "sub" / "b.log").write_text("beta", encoding="utf-8")
    return root


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "logs").mkdir()
    root = logging.getLogger()
    level = root.level
    yield tmp_path
    root.setLevel(level)


def test_parser_defaults_for_run():
    args = build_parser().parse_args(["run", "src", "dst"])
    assert args.command == "run"
    assert args.dry_run is False
    assert args.config is None
    assert args.logging_level == "DEBUG"


@pytest.mark.parametrize(
    ("extra", "expected"),
    [(["--dry-run"], True), (["--dry-run", "true"], True), (["--dry-run", "false"], False)],
)
def test_parser_dry_run_values(extra, expected):
    args = build_parser().parse_args(["run", "src", "dst", *extra])
    assert args.dry_run is expected


def test_parser_rejects_bad_dry_run_value():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "src", "dst", "--dry-run", "maybe"])


def test_parser_rejects_bad_logging_level():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-l", "loud", "list", "src"])


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_load_config_defaults():
    assert load_config(None) == Config()


def test_load_config_unknown_format(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_list_command_returns_matches(source):
    files = list_command(source)
    assert sorted(p.relative_to(source).as_posix() for p in files) == ["a.txt", "sub/b.log"]


def test_list_command_applies_config(source, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"filters": {"exclude_patterns": ["**/*.log"]}}), encoding="utf-8")
    files = list_command(source, config)
    assert [p.relative_to(source).as_posix() for p in files] == ["a.txt"]


def test_run_command_moves_files(source, tmp_path, capsys):
    target = tmp_path / "target"
    files = run_command(source, target)
    assert len(files) == 2
    assert (target / "a.txt").read_text(encoding="utf-8") == "alpha"
    assert (target / "sub" / "b.log").read_text(encoding="utf-8") == "beta"
    assert not (source / "a.txt").exists()
    assert "Number of files in source folder: 2" in capsys.readouterr().out


def test_run_command_copies_with_config(source, tmp_path):
    target = tmp_path / "target"
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"transfer": {"copy": True}}), encoding="utf-8")
    run_command(source, target, config)
    assert (source / "a.txt").exists()
    assert (target / "a.txt").read_text(encoding="utf-8") == "alpha"


def test_run_command_dry_run_changes_nothing(source, tmp_path):
    target = tmp_path / "target"
    files = run_command(source, target, None, True)
    assert len(files) == 2
    assert (source / "a.txt").exists()
    assert not target.exists()


def test_main_list_writes_log(workdir, source):
    assert main(["list", str(source)]) == 0
    text = (workdir / "logs" / "app.log").read_text(encoding="utf-8")
    assert "FileTamer program started!" in text
    assert "Operations completed." in text
    assert "a.txt" in text


def test_main_run_moves_files(workdir, source, capsys):
    target = workdir / "target"
    assert main(["run", str(source), str(target)]) == 0
    assert (target / "sub" / "b.log").exists()
    assert "Number of files in source folder: 2" in capsys.readouterr().out


def test_main_bad_config_returns_error(workdir, source):
    missing = workdir / "missing.yaml"
    assert main(["list", str(source), "--config", str(missing)]) == 1
    text = (workdir / "logs" / "app.log").read_text(encoding="utf-8")
    assert "Error loading config" in text
    assert "Operations completed." not in text