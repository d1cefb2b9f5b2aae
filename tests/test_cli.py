"""Tests for CLI parsing and exit codes."""
import pytest
from pathlib import Path

from typesorter.cli import build_config, create_parser, main
from typesorter.core.config import CollisionPolicy
from typesorter.core.errors import ConfigError


class TestCLIParsing:
    """Test CLI argument parsing."""

    def test_destination_variant(self):
        """Test short flags for the direct variant."""
        args = create_parser().parse_args(["-s", "/in", "-d", "/out"])

        assert args.source == Path("/in")
        assert args.destination == Path("/out")
        assert args.config is None
        assert args.on_conflict == "skip"
        assert args.verbose is False
        assert args.quiet is False

    def test_config_variant(self):
        """Test long flags for the config variant."""
        args = create_parser().parse_args(["--source", "/in", "--config", "sorter.toml"])

        assert args.config == Path("sorter.toml")
        assert args.destination is None

    def test_on_conflict(self):
        """Test collision policy flag."""
        args = create_parser().parse_args(["-s", "/in", "-d", "/out", "--on-conflict", "rename"])
        assert args.on_conflict == "rename"

    def test_source_required(self):
        """Test source is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-d", "/out"])

    def test_destination_or_config_required(self):
        """Test one destination flag is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-s", "/in"])

    def test_destination_and_config_exclusive(self):
        """Test both destination flags are rejected."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-s", "/in", "-d", "/out", "-c", "x.toml"])

    def test_invalid_policy(self):
        """Test unknown policy is rejected."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-s", "/in", "-d", "/out", "--on-conflict", "merge"])


class TestBuildConfig:
    """Tests for resolving configuration from arguments."""

    def test_direct(self):
        """Test destinations derived from base."""
        args = create_parser().parse_args(["-s", "in", "-d", "out", "--on-conflict", "overwrite"])
        config = build_config(args)

        assert config.source == Path("in")
        assert config.destinations.images == Path("out/Images")
        assert config.collision_policy == CollisionPolicy.OVERWRITE

    def test_config_file(self, tmp_path):
        """Test destinations read from config."""
        path = tmp_path / "sorter.toml"
        path.write_text('[directories]\nimages = "i"\ndocuments = "d"\naudio = "a"\n')
        args = create_parser().parse_args(["-s", "in", "-c", str(path)])

        assert build_config(args).destinations.audio == Path("a")

    def test_bad_config_file(self, tmp_path):
        """Test config errors propagate."""
        args = create_parser().parse_args(["-s", "in", "-c", str(tmp_path / "none.toml")])
        with pytest.raises(ConfigError):
            build_config(args)


class TestMain:
    """Tests for the main entry point."""

    @pytest.fixture
    def source(self, tmp_path: Path) -> Path:
        src = tmp_path / "src"
        src.mkdir()
        (src / "photo.JPG").touch()
        (src / "notes.txt").touch()
        (src / "song.mp3").touch()
        (src / "archive.zip").touch()
        (src / "sub").mkdir()
        return src

    def test_success(self, tmp_path, source):
        """Test a full run returns 0."""
        out = tmp_path / "out"
        assert main(["-s", str(source), "-d", str(out)]) == 0

        assert (out / "Images" / "photo.JPG").exists()
        assert (out / "Documents" / "notes.txt").exists()
        assert (out / "Audio" / "song.mp3").exists()
        assert (source / "archive.zip").exists()
        assert (source / "sub").is_dir()

    def test_success_quiet(self, tmp_path, source, capsys):
        """Test quiet mode prints nothing on success."""
        assert main(["-q", "-s", str(source), "-d", str(tmp_path / "out")]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_missing_source(self, tmp_path, capsys):
        """Test missing source exits with 1 and an error line."""
        out = tmp_path / "out"
        code = main(["-q", "-s", str(tmp_path / "missing"), "-d", str(out)])

        assert code == 1
        assert not out.exists()
        err = capsys.readouterr().err
        assert err.startswith("Error: Source directory does not exist")

    def test_missing_source_rich(self, tmp_path, capsys):
        """Test default reporter also prefixes errors."""
        code = main(["-s", str(tmp_path / "missing"), "-d", str(tmp_path / "out")])

        assert code == 1
        assert "Error: Source directory does not exist" in capsys.readouterr().err

    def test_config_missing_key(self, tmp_path, source, capsys):
        """Test config without audio fails before scanning."""
        config = tmp_path / "sorter.toml"
        config.write_text(
            "[directories]\n"
            f'images = "{(tmp_path / "i").as_posix()}"\n'
            f'documents = "{(tmp_path / "d").as_posix()}"\n'
        )
        code = main(["-q", "-s", str(source), "-c", str(config)])

        assert code == 1
        assert (source / "photo.JPG").exists()
        assert not (tmp_path / "i").exists()
        assert "audio" in capsys.readouterr().err

    def test_config_not_utf8(self, tmp_path, source, capsys):
        """Test an undecodable config file exits with 1 and an error line."""
        config = tmp_path / "sorter.toml"
        config.write_bytes(b"\xff\xfe")
        code = main(["-q", "-s", str(source), "-c", str(config)])

        assert code == 1
        assert (source / "photo.JPG").exists()
        assert capsys.readouterr().err.startswith("Error: Cannot parse config file")

    def test_config_variant(self, tmp_path, source):
        """Test a config-driven run."""
        config = tmp_path / "sorter.toml"
        config.write_text(
            "[directories]\n"
            f'images = "{(tmp_path / "pics").as_posix()}"\n'
            f'documents = "{(tmp_path / "docs").as_posix()}"\n'
            f'audio = "{(tmp_path / "music").as_posix()}"\n'
        )
        assert main(["-q", "-s", str(source), "-c", str(config)]) == 0

        assert (tmp_path / "pics" / "photo.JPG").exists()
        assert (tmp_path / "docs" / "notes.txt").exists()
        assert (tmp_path / "music" / "song.mp3").exists()

    def test_move_error(self, tmp_path, source, capsys):
        """Test move failures exit with 1."""
        blocker = tmp_path / "blocker"
        blocker.write_text("in the way")
        code = main(["-q", "-s", str(source), "-d", str(blocker)])

        assert code == 1
        assert "Error: Cannot create directory" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test --version exits cleanly."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "typesorter" in capsys.readouterr().out
