import pytest

from favicongen import __version__
from favicongen.cli import main


def test_help_without_arguments(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Generate favicons from a source image" in out
    assert "--output-dir DIR" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "does-not-exist.png"), "--output-dir", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "Could not read file" in err
    assert "does-not-exist.png" in err


def test_prints_markup(tmp_path, source_file, capsys):
    out_dir = tmp_path / "icons"
    assert main([str(source_file), "--output-dir", str(out_dir), "--base-path", "/foo/bar/"]) == 0
    captured = capsys.readouterr()
    assert captured.out == (
        '<link rel="icon" href="/foo/bar/favicon.ico" sizes="any">\n'
        '<link rel="apple-touch-icon" href="/foo/bar/apple-touch-icon.png">\n'
        '<link rel="manifest" href="/foo/bar/manifest.webmanifest">\n'
    )
    assert "Source image is not an SVG - skipping SVG output" in captured.err
    assert (out_dir / "favicon.ico").exists()


def test_positional_output_dir(tmp_path, source_file, capsys):
    out_dir = tmp_path / "positional"
    assert main([str(source_file), str(out_dir), "--no-warn"]) == 0
    assert capsys.readouterr().err == ""
    assert (out_dir / "icon-512.png").exists()


def test_no_manifest_and_overwrite(tmp_path, source_file, capsys):
    args = [str(source_file), "--output-dir", str(tmp_path), "--no-manifest", "--no-warn"]
    assert main(args) == 0
    assert "manifest" not in capsys.readouterr().out
    assert not (tmp_path / "manifest.webmanifest").exists()
    assert main(args) == 1
    assert "Refusing to overwrite" in capsys.readouterr().err
    assert main(args + ["--overwrite"]) == 0
