"""Tests for the quickscii command-line interface."""

import pytest

from conftest import requires_font
from quickscii import cli
from quickscii.ascii.charsets import CHARSET_MIX, CHARSETS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("QUICKSCII_WIDTH", "QUICKSCII_HEIGHT", "QUICKSCII_CHARSET", "QUICKSCII_INVERT"):
        monkeypatch.delenv(name, raising=False)
    # Keep load_dotenv() from picking up a developer's .env
    monkeypatch.chdir(tmp_path)


def test_text_to_stdout(checkerboard_png, capsys):
    assert cli.main(["text", str(checkerboard_png), "-W", "4", "-H", "2", "-c", "mix"]) == 0
    out = capsys.readouterr().out
    lo, hi = CHARSET_MIX[0], CHARSET_MIX[-1]
    assert out == f"{lo}{hi}{lo}{hi}\n{hi}{lo}{hi}{lo}\n"


def test_text_to_file(gradient_png, tmp_path, capsys):
    out_file = tmp_path / "art.txt"
    code = cli.main(["text", str(gradient_png), "-W", "12", "-H", "3", "-o", str(out_file)])
    assert code == 0
    assert capsys.readouterr().out == ""
    lines = out_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert all(len(line) == 12 for line in lines)


def test_text_invert(checkerboard_png, capsys):
    cli.main(["text", str(checkerboard_png), "-W", "4", "-H", "2", "-c", "standard", "--invert"])
    assert capsys.readouterr().out == "@ @ \n @ @\n"


def test_env_defaults(gradient_png, monkeypatch, capsys):
    monkeypatch.setenv("QUICKSCII_WIDTH", "7")
    monkeypatch.setenv("QUICKSCII_HEIGHT", "2")
    assert cli.main(["text", str(gradient_png)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [len(line) for line in lines] == [7, 7]


def test_flag_overrides_invalid_env_charset(checkerboard_png, monkeypatch, capsys):
    monkeypatch.setenv("QUICKSCII_CHARSET", "neon")
    code = cli.main(["text", str(checkerboard_png), "-W", "4", "-H", "2", "-c", "standard"])
    assert code == 0
    assert capsys.readouterr().out == " @ @\n@ @ \n"


def test_flag_overrides_invalid_env_width(checkerboard_png, monkeypatch, capsys):
    monkeypatch.setenv("QUICKSCII_WIDTH", "wide")
    code = cli.main(["text", str(checkerboard_png), "-W", "4", "-H", "2", "-c", "standard"])
    assert code == 0


def test_invalid_env_charset_without_flag(checkerboard_png, monkeypatch, capsys):
    monkeypatch.setenv("QUICKSCII_CHARSET", "neon")
    code = cli.main(["text", str(checkerboard_png), "-W", "4", "-H", "2"])
    assert code == 1
    assert "neon" in capsys.readouterr().err


def test_no_invert_overrides_env(checkerboard_png, monkeypatch, capsys):
    monkeypatch.setenv("QUICKSCII_INVERT", "1")
    argv = ["text", str(checkerboard_png), "-W", "4", "-H", "2", "-c", "standard"]
    cli.main(argv)
    assert capsys.readouterr().out == "@ @ \n @ @\n"
    cli.main(argv + ["--no-invert"])
    assert capsys.readouterr().out == " @ @\n@ @ \n"


def test_missing_image(tmp_path, capsys):
    code = cli.main(["text", str(tmp_path / "missing.png"), "-W", "10", "-H", "10"])
    assert code == 1
    err = capsys.readouterr().err
    assert "error: failed to read image" in err
    assert "missing.png" in err


def test_invalid_dimensions(gradient_png, capsys):
    code = cli.main(["text", str(gradient_png), "-W", "-1", "-H", "10"])
    assert code == 1
    assert "invalid dimensions" in capsys.readouterr().err


def test_unknown_charset_rejected_by_parser(gradient_png):
    with pytest.raises(SystemExit):
        cli.main(["text", str(gradient_png), "-c", "sparkle"])


def test_unwritable_text_output(gradient_png, tmp_path, capsys):
    target = tmp_path / "missing_dir" / "art.txt"
    code = cli.main(["text", str(gradient_png), "-W", "4", "-H", "2", "-o", str(target)])
    assert code == 1
    assert "failed to write text" in capsys.readouterr().err


def test_charsets_listing(capsys):
    assert cli.main(["charsets"]) == 0
    out = capsys.readouterr().out
    for name, ramp in CHARSETS.items():
        assert name in out
        assert ramp in out


def test_image_font_unavailable(gradient_png, tmp_path, monkeypatch, capsys):
    from quickscii.ascii import renderer

    monkeypatch.setattr(renderer, "FONT_CANDIDATES", ())
    monkeypatch.setattr(renderer, "_font_cache", {})
    out = tmp_path / "art.png"
    code = cli.main(["image", str(gradient_png), str(out), "-W", "8", "-H", "4",
                     "--font", "NoSuchFont.ttf"])
    assert code == 1
    assert "failed to load font" in capsys.readouterr().err
    assert not out.exists()


@requires_font
def test_image_command(gradient_png, tmp_path, capsys):
    out = tmp_path / "art.png"
    code = cli.main(["image", str(gradient_png), str(out), "-W", "8", "-H", "4",
                     "--cell-size", "10", "--padding", "0"])
    assert code == 0
    assert capsys.readouterr().out.strip() == str(out)
    assert out.read_bytes()[:4] == b"\x89PNG"
