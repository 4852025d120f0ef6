from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Defaults when no flags are given.
2. Mapping of flags to ListingOptions.
3. Rejection of unknown color modes.
"""

import pytest

from glyphls.interface.cli.args import args_to_options, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_defaults():
    args = parse_args([])

    assert args.path is None
    assert args.single_column is False
    assert args.show_all is False
    assert args.color == "auto"
    assert args.config_path is None
    assert args.dump_config is False
    assert args.debug is False
    assert args.log_file is None


def test_flags_mapping(fake_detector):
    args = parse_args(["-1", "--all", "src/*.py"])
    options = args_to_options(args, use_color=True, terminal_width=120, detector=fake_detector)

    assert args.path == "src/*.py"
    assert options.single_column is True
    assert options.show_all is True
    assert options.use_color is True
    assert options.terminal_width == 120
    assert options.detector is fake_detector


def test_short_all_flag():
    assert parse_args(["-a"]).show_all is True


def test_diagnostic_flags():
    args = parse_args(["--debug", "--log-file", "out.log", "--config", "my.toml", "--dump-config"])

    assert args.debug is True
    assert args.log_file == "out.log"
    assert args.config_path == "my.toml"
    assert args.dump_config is True


def test_invalid_color_mode_exits():
    with pytest.raises(SystemExit):
        parse_args(["--color", "sometimes"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--version"])
    assert exc.value.code == 0
    assert "glyphls 0.1.0" in capsys.readouterr().out
