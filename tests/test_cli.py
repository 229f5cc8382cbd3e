import pytest

from dotsym.cli import build_parser, main


def _layout(tmp_path, table):
    src = tmp_path / "src"
    dst = tmp_path / "home"
    src.mkdir()
    dst.mkdir()
    (src / "bashrc").write_text("alias ll='ls -l'\n")
    decl = tmp_path / "DOTS"
    decl.write_text(table)
    return src, dst, decl


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.file_format == "org"
    assert args.filename == "DOTS"
    assert args.force is False
    assert args.headers is False
    assert args.url == ""


def test_parser_short_options():
    args = build_parser().parse_args(["-f", "-j", "-t", "csv", "-d", "mydots"])
    assert args.force is True
    assert args.headers is True
    assert args.file_format == "csv"
    assert args.filename == "mydots"


def test_parser_rejects_unknown_format():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-t", "json"])


def test_main_links_files(tmp_path, capsys):
    src, dst, decl = _layout(
        tmp_path,
        "| Name | Source | Dest | Op |\n|---|\n| bash | bashrc | .bashrc | symfile |\n",
    )
    status = main([
        "-j",
        "-d", str(decl),
        "--source-prefix", str(src),
        "--dest-prefix", str(dst),
    ])
    assert status == 0
    assert (dst / ".bashrc").is_symlink()
    assert (dst / ".bashrc").read_text() == "alias ll='ls -l'\n"
    assert "[DEBUG]: Force status: false" in capsys.readouterr().out


def test_main_missing_declaration_file(tmp_path, capsys):
    status = main(["-d", str(tmp_path / "absent")])
    assert status == 1
    assert "does not exist" in capsys.readouterr().err


def test_main_verification_failure(tmp_path, capsys):
    src, dst, decl = _layout(tmp_path, "| bash | missing | .bashrc | symfile |\n")
    status = main([
        "-d", str(decl),
        "--source-prefix", str(src),
        "--dest-prefix", str(dst),
    ])
    assert status == 1
    assert "Dotfiles contains errors." in capsys.readouterr().err
    assert not (dst / ".bashrc").exists()


def test_main_force_replaces(tmp_path):
    src, dst, decl = _layout(tmp_path, "| bash | bashrc | .bashrc | symfile |\n")
    (dst / ".bashrc").write_text("old")
    status = main([
        "--force",
        "-d", str(decl),
        "--source-prefix", str(src),
        "--dest-prefix", str(dst),
    ])
    assert status == 0
    assert (dst / ".bashrc").is_symlink()


def test_main_csv_fails(tmp_path, capsys):
    _, _, decl = _layout(tmp_path, "a,b,c\n")
    status = main(["-t", "csv", "-d", str(decl)])
    assert status == 1
    assert "csv" in capsys.readouterr().err