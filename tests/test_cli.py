"""Tests for the command line interface."""
import pytest

from flacsplit import cli


def test_default_format_is_flac(monkeypatch):
    monkeypatch.delenv("FLACSPLIT_FORMATS", raising=False)
    monkeypatch.delenv("FLACSPLIT_FORCE", raising=False)
    args = cli.parse_arguments(["album.cue"])
    assert args.cuefile == "album.cue"
    assert args.formats == ["flac"]
    assert args.force is False


def test_format_flags(monkeypatch):
    monkeypatch.delenv("FLACSPLIT_FORMATS", raising=False)
    assert cli.parse_arguments(["-o", "-m", "a.cue"]).formats == ["ogg", "mp3"]
    assert cli.parse_arguments(["--flac", "--mp3", "a.cue"]).formats == ["flac", "mp3"]


def test_force_flag():
    assert cli.parse_arguments(["--force", "a.cue"]).force is True


def test_environment_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("FLACSPLIT_FORMATS", "ogg, MP3")
    monkeypatch.setenv("FLACSPLIT_FORCE", "yes")
    monkeypatch.setenv("FLACSPLIT_OUTPUT_DIR", str(tmp_path))

    args = cli.parse_arguments(["a.cue"])

    assert args.formats == ["ogg", "mp3"]
    assert args.force is True
    assert args.output_dir == str(tmp_path)


def test_flags_override_environment_formats(monkeypatch):
    monkeypatch.setenv("FLACSPLIT_FORMATS", "ogg")
    assert cli.parse_arguments(["-f", "a.cue"]).formats == ["flac"]


def test_bad_environment_format(monkeypatch):
    monkeypatch.setenv("FLACSPLIT_FORMATS", "wav")
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments(["a.cue"])
    assert excinfo.value.code == 2


def test_missing_cuefile_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments([])
    assert excinfo.value.code != 0


def test_version_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments(["--version"])
    assert excinfo.value.code == 0
    assert "GNU General Public License" in capsys.readouterr().out


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments(["-h"])
    assert excinfo.value.code == 0
    assert "--mp3" in capsys.readouterr().out


def test_main_passes_options(monkeypatch, tmp_path):
    calls = {}

    def fake_split(cue_path, **kwargs):
        calls["cue_path"] = cue_path
        calls.update(kwargs)
        return {"status": "success"}

    monkeypatch.setattr(cli, "split_cue_sheet", fake_split)
    monkeypatch.delenv("FLACSPLIT_FORMATS", raising=False)

    assert cli.main(["-m", "--force", "-d", str(tmp_path), "rip/album.cue"]) == 0
    assert calls["cue_path"] == "rip/album.cue"
    assert calls["formats"] == ["mp3"]
    assert calls["force"] is True
    assert calls["output_root"] == str(tmp_path)


def test_main_exits_nonzero_on_error(monkeypatch):
    monkeypatch.setattr(cli, "split_cue_sheet", lambda cue_path, **kwargs: {"status": "error"})
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["album.cue"])
    assert excinfo.value.code == 1
