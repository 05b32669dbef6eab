"""Tests for the command-line driver."""

from __future__ import annotations

from pathlib import Path

import pytest

from nesheader import __version__
from nesheader.cli import ExitCode, main


@pytest.fixture
def rom_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    path = tmp_path / "zelda.nes"
    path.write_bytes(sample_bytes + bytes(40 * 1024))
    return path


class TestMain:
    def test_no_args(self, capsys) -> None:
        assert main([]) == ExitCode.NO_ARGS
        captured = capsys.readouterr()
        assert "No Args." in captured.err
        assert "Usage:" in captured.out

    def test_help_only(self, capsys) -> None:
        assert main(["-h"]) == ExitCode.OK
        out = capsys.readouterr().out
        assert "The flags are:" in out

    def test_no_filename(self, capsys) -> None:
        assert main(["-v"]) == ExitCode.NO_FILENAME
        assert "No Filename." in capsys.readouterr().err

    def test_file_not_found(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "missing.nes")]) == ExitCode.FILE_NOT_FOUND
        assert "File Does Not Exist." in capsys.readouterr().err

    def test_decodes_file(self, rom_file: Path, capsys) -> None:
        assert main([str(rom_file)]) == ExitCode.OK
        out = capsys.readouterr().out
        assert "PRG ROM:  32 KB" in out
        assert "CHR ROM:  8 KB" in out
        assert "Flags 6:  00000001" in out

    def test_help_with_file_continues(self, rom_file: Path, capsys) -> None:
        assert main(["-h", str(rom_file)]) == ExitCode.OK
        out = capsys.readouterr().out
        assert "The flags are:" in out
        assert "PRG ROM:  32 KB" in out

    def test_version(self, rom_file: Path, capsys) -> None:
        assert main(["-v", str(rom_file)]) == ExitCode.OK
        assert f"Version = {__version__}" in capsys.readouterr().err

    def test_debug_dump(self, rom_file: Path, capsys) -> None:
        assert main(["-d", str(rom_file)]) == ExitCode.OK
        captured = capsys.readouterr()
        assert '*    "prg_rom_units": 2,' in captured.out
        assert "#1 - Args: -d" in captured.err
        assert "File Size = 40.0 KB" in captured.err

    def test_debug_hidden_by_default(self, rom_file: Path, capsys) -> None:
        main([str(rom_file)])
        captured = capsys.readouterr()
        assert "prg_rom_units" not in captured.out
        assert "Args:" not in captured.err

    def test_truncated_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "short.nes"
        path.write_bytes(b"NES\x1a\x02")
        assert main([str(path)]) == ExitCode.DECODE_FAILED
        assert "got 5 of 16 bytes" in capsys.readouterr().err

    def test_invalid_magic(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "bad.nes"
        path.write_bytes(b"UNIF" + bytes(28))
        assert main([str(path)]) == ExitCode.DECODE_FAILED
        err = capsys.readouterr().err
        assert "expected 4E 45 53 1A" in err
        assert "got 55 4E 49 46" in err

    def test_directory_is_not_decodable(self, tmp_path: Path) -> None:
        assert main([str(tmp_path)]) == ExitCode.DECODE_FAILED

    def test_dirty_padding_warns(self, tmp_path: Path, sample_bytes: bytes, capsys) -> None:
        path = tmp_path / "dirty.nes"
        path.write_bytes(sample_bytes[:11] + b"DiskD")
        assert main([str(path)]) == ExitCode.OK
        assert "padding is not zero" in capsys.readouterr().err

    def test_log_dir(self, rom_file: Path, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        assert main(["--log-dir", str(log_dir), str(rom_file)]) == ExitCode.OK
        assert (log_dir / "nes-header-decoder.log").exists()

    def test_last_file_wins(self, tmp_path: Path, rom_file: Path, capsys) -> None:
        missing = tmp_path / "missing.nes"
        assert main([str(missing), str(rom_file)]) == ExitCode.OK
        assert "PRG ROM:  32 KB" in capsys.readouterr().out
        assert main([str(rom_file), str(missing)]) == ExitCode.FILE_NOT_FOUND

    def test_unknown_flag_is_a_filename(self, capsys) -> None:
        assert main(["-x"]) == ExitCode.FILE_NOT_FOUND
        assert "File Does Not Exist." in capsys.readouterr().err

    def test_malformed_flag(self, capsys) -> None:
        assert main(["a.nes", "--log-dir"]) == ExitCode.BAD_ARGS
        captured = capsys.readouterr()
        assert "Bad Args" in captured.err
        assert "Usage:" in captured.out
