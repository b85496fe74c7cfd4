import pytest

from resgen import __version__
from resgen.cli import build_parser, main
from resgen.settings import DEFAULT_ICON, DEFAULT_OUTPUT_DIR, DEFAULT_SPLASH, RunSettings


def test_defaults_enable_both_asset_types():
    settings = RunSettings.from_args(build_parser().parse_args([]))
    assert settings == RunSettings()
    assert settings.icon_file == DEFAULT_ICON
    assert settings.splash_file == DEFAULT_SPLASH
    assert settings.output_dir == DEFAULT_OUTPUT_DIR
    assert settings.platforms is None


def test_flags():
    args = build_parser().parse_args(["-I", "-m", "-c", "-p", "android, ios", "-o", "out"])
    settings = RunSettings.from_args(args)
    assert settings.make_icon and not settings.make_splash
    assert settings.make_dir and settings.print_manifest
    assert settings.platforms == ("android", "ios")
    assert str(settings.output_dir) == "out"


def test_both_only_flags_enable_both():
    settings = RunSettings.from_args(build_parser().parse_args(["-I", "-S"]))
    assert settings.make_icon and settings.make_splash


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_list_platforms(capsys):
    assert main(["--list-platforms"]) == 0
    out = capsys.readouterr().out
    assert "blackberry10: icon (7)" in out
    assert "android: icon (6), splash (12)" in out


def test_end_to_end_with_manifest(sources, tmp_path, capsys):
    out = tmp_path / "build" / "res"
    code = main([
        "-i", str(sources["icon"]),
        "-p", "blackberry10",
        "-o", str(out),
        "-I", "-m", "-c",
    ])
    captured = capsys.readouterr()
    assert code == 0
    assert f"resgen {__version__}" in captured.out
    assert len(list((out / "blackberry10" / "icon").iterdir())) == 7
    assert f'<icon src="{out.as_posix()}/blackberry10/icon/icon-80.png" width="80" height="80" />' in captured.out


def test_bad_platform_writes_nothing(sources, tmp_path, capsys):
    code = main(["-i", str(sources["icon"]), "-s", str(sources["splash"]), "-p", "android,palm", "-o", str(tmp_path)])
    captured = capsys.readouterr()
    assert code == 1
    assert "Error: Bad platforms: palm" in captured.err
    assert list(tmp_path.iterdir()) == []


def test_missing_output_dir_fails(sources, tmp_path, capsys):
    code = main(["-i", str(sources["icon"]), "-I", "-o", str(tmp_path / "missing")])
    assert code == 1
    assert "Error: Output directory not found" in capsys.readouterr().err


def test_quiet_prints_only_errors(tmp_path, capsys):
    code = main(["-q", "-I", "-i", str(tmp_path / "none.png"), "-o", str(tmp_path)])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Could not load icon file" in captured.err
