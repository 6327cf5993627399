from __future__ import annotations

from pathlib import Path

import pytest

from friendly_files.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep the repository's configs/config.yaml out of the picture.
    monkeypatch.chdir(tmp_path)


def _run(*argv: str) -> int:
    return main(["--log-level", "WARNING", *argv])


def _touch(path: Path, content: str = "x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_list_prints_one_path_per_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "data"
    _touch(root / "a.txt")
    _touch(root / "b.csv")
    _touch(root / ".hidden.txt")

    assert _run("list", str(root), "--ext", ".txt") == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [str(root / "a.txt")]


def test_list_uses_configured_default_extension(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "data"
    _touch(root / "a.txt")
    _touch(root / "b.csv")
    config = _touch(tmp_path / "cfg.yaml", "defaults:\n  extension: .csv\n")

    assert _run("--config", str(config), "list", str(root)) == 0

    assert capsys.readouterr().out.splitlines() == [str(root / "b.csv")]


def test_list_missing_root_exits_with_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run("list", str(tmp_path / "missing")) == 1
    assert capsys.readouterr().out == ""


def test_size_plain_and_human(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "blob.bin"
    target.write_bytes(b"x" * 2048)

    assert _run("size", str(target)) == 0
    assert capsys.readouterr().out.strip() == "2048"

    assert _run("size", str(target), "--human") == 0
    assert capsys.readouterr().out.strip() == "2.0KB"


def test_rename_ext_single_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _touch(tmp_path / "notes.txt")

    assert _run("rename-ext", str(source), "md") == 0

    assert capsys.readouterr().out.strip() == str(tmp_path / "notes.md")
    assert (tmp_path / "notes.md").exists()
    assert not source.exists()


def test_rename_ext_directory_dry_run_changes_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "batch"
    first = _touch(root / "one.txt")
    second = _touch(root / "sub" / "two.txt")
    _touch(root / "keep.csv")

    assert _run("rename-ext", str(root), "md", "--match", ".txt", "--dry-run", "--no-progress") == 0

    out = capsys.readouterr().out
    assert f"[DRY-RUN] {first} → {root / 'one.md'}" in out
    assert f"[DRY-RUN] {second} → {root / 'sub' / 'two.md'}" in out
    assert first.exists() and second.exists()


def test_rename_ext_directory_renames_matches(tmp_path: Path) -> None:
    root = tmp_path / "batch"
    _touch(root / "one.txt")
    _touch(root / "sub" / "two.txt")
    _touch(root / "keep.csv")

    assert _run("rename-ext", str(root), "md", "--match", ".txt", "--no-progress") == 0

    names = sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
    assert names == ["keep.csv", "one.md", "sub/two.md"]


def test_move_and_rename(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _touch(tmp_path / "a.txt")

    assert _run("move", str(source), str(tmp_path / "b.txt")) == 0
    assert _run("rename", str(tmp_path / "b.txt"), "c.txt") == 0

    assert capsys.readouterr().out.splitlines() == [str(tmp_path / "b.txt"), str(tmp_path / "c.txt")]
    assert (tmp_path / "c.txt").exists()


def test_move_onto_existing_fails(tmp_path: Path) -> None:
    source = _touch(tmp_path / "a.txt")
    _touch(tmp_path / "b.txt")

    assert _run("move", str(source), str(tmp_path / "b.txt")) == 1
    assert source.exists()


def test_mkdir_and_delete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "x" / "y"

    assert _run("mkdir", str(target)) == 0
    assert target.is_dir()

    assert _run("delete", str(tmp_path / "x"), "--dry-run") == 0
    assert target.is_dir()

    assert _run("delete", str(tmp_path / "x")) == 0
    assert not (tmp_path / "x").exists()

    out = capsys.readouterr().out
    assert "Would delete" in out


def test_mkdir_parent_only(tmp_path: Path) -> None:
    target = tmp_path / "reports" / "today.csv"

    assert _run("mkdir", str(target), "--parent") == 0

    assert target.parent.is_dir()
    assert not target.exists()


def test_tempdir_prints_created_directory(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run("tempdir", "--prefix", "cli-test-") == 0

    created = Path(capsys.readouterr().out.strip())
    try:
        assert created.is_dir()
        assert created.name.startswith("cli-test-")
    finally:
        created.rmdir()


def test_info_reports_name_parts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "archive.tar.gz"
    target.write_bytes(b"12345")

    assert _run("info", str(target)) == 0

    out = capsys.readouterr().out.splitlines()
    assert "exists: yes" in out
    assert "name: archive.tar" in out
    assert "extension: gz" in out
    assert "size: 5" in out


def test_invalid_config_exits_with_failure(tmp_path: Path) -> None:
    config = _touch(tmp_path / "broken.yaml", "logging: 3\n")

    assert _run("--config", str(config), "size", str(tmp_path)) == 1
