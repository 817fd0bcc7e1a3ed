"""Tests for Archiver Config."""

from pathlib import Path

from doclet_archive.doclet_processor.config import ArchiverConfig

ENV_VARS = [
    "LIBRARY_NAME",
    "LIBRARY_VERSION",
    "LIBRARY_BASE_URL",
    "LIBRARY_JAVADOC_URL_PATTERN",
    "LIBRARY_PROJECT_URL",
    "DOCLET_OUTPUT_PATH",
    "DOCLET_PRETTY_PRINT",
    "LOG_PROCESSING_PROGRESS",
]


class TestArchiverConfig:
    """Test cases for ArchiverConfig."""

    def test_defaults(self):
        """Test default settings."""
        config = ArchiverConfig()

        assert config.output_path is None
        assert config.pretty_print is False
        assert config.log_progress is True

    def test_output_path_is_converted(self):
        """Test string output paths become Path objects."""
        assert ArchiverConfig(output_path="out/lib.zip").output_path == Path("out/lib.zip")

    def test_default_filename(self):
        """Test the default archive name combines library name and version."""
        config = ArchiverConfig(library_name="guava", library_version="33.0")

        assert config.default_filename() == "guava-33.0.zip"

    def test_resolve_without_output_path(self):
        """Test the default file name is used in the working directory."""
        config = ArchiverConfig(library_name="guava", library_version="33.0")

        assert config.resolve_output_path() == Path("guava-33.0.zip")

    def test_resolve_directory_output_path(self, tmp_path):
        """Test a directory receives the default file name."""
        config = ArchiverConfig(library_name="guava", library_version="33.0", output_path=tmp_path)

        assert config.resolve_output_path() == tmp_path / "guava-33.0.zip"

    def test_resolve_file_output_path(self, tmp_path):
        """Test a file path is used as given."""
        config = ArchiverConfig(library_name="guava", output_path=tmp_path / "custom.zip")

        assert config.resolve_output_path() == tmp_path / "custom.zip"

    def test_from_env(self, monkeypatch, tmp_path):
        """Test configuration from environment variables."""
        monkeypatch.setenv("LIBRARY_NAME", "guava")
        monkeypatch.setenv("LIBRARY_VERSION", "33.0")
        monkeypatch.setenv("LIBRARY_BASE_URL", "https://guava.dev/releases/33.0/api/docs/")
        monkeypatch.setenv("LIBRARY_PROJECT_URL", "https://github.com/google/guava")
        monkeypatch.setenv("DOCLET_OUTPUT_PATH", str(tmp_path))
        monkeypatch.setenv("DOCLET_PRETTY_PRINT", "true")
        monkeypatch.setenv("LOG_PROCESSING_PROGRESS", "false")
        monkeypatch.delenv("LIBRARY_JAVADOC_URL_PATTERN", raising=False)

        config = ArchiverConfig.from_env(env_file=tmp_path / "missing.env")

        assert config.library_name == "guava"
        assert config.library_version == "33.0"
        assert config.base_url == "https://guava.dev/releases/33.0/api/docs/"
        assert config.javadoc_url_pattern is None
        assert config.project_url == "https://github.com/google/guava"
        assert config.output_path == tmp_path
        assert config.pretty_print is True
        assert config.log_progress is False

    def test_from_env_file(self, monkeypatch, tmp_path):
        """Test values are loaded from a .env file."""
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("LIBRARY_NAME=commons-lang3\nLIBRARY_VERSION=3.14.0\n")

        config = ArchiverConfig.from_env(env_file=env_file)

        assert config.library_name == "commons-lang3"
        assert config.library_version == "3.14.0"
        assert config.output_path is None
        assert config.pretty_print is False
