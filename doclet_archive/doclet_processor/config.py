"""Configuration for archive generation."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


@dataclass
class ArchiverConfig:
    """Library details and output settings of a generation run."""

    library_name: Optional[str] = None
    library_version: Optional[str] = None
    base_url: Optional[str] = None
    javadoc_url_pattern: Optional[str] = None
    project_url: Optional[str] = None
    output_path: Optional[Path] = None
    pretty_print: bool = False
    log_progress: bool = True

    def __post_init__(self):
        if self.output_path is not None and not isinstance(self.output_path, Path):
            self.output_path = Path(self.output_path)

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "ArchiverConfig":
        """Create configuration from environment variables, loading a .env file first."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        output_path = os.getenv("DOCLET_OUTPUT_PATH")
        return cls(
            library_name=os.getenv("LIBRARY_NAME"),
            library_version=os.getenv("LIBRARY_VERSION"),
            base_url=os.getenv("LIBRARY_BASE_URL"),
            javadoc_url_pattern=os.getenv("LIBRARY_JAVADOC_URL_PATTERN"),
            project_url=os.getenv("LIBRARY_PROJECT_URL"),
            output_path=Path(output_path) if output_path else None,
            pretty_print=os.getenv("DOCLET_PRETTY_PRINT", "false").lower() == "true",
            log_progress=os.getenv("LOG_PROCESSING_PROGRESS", "true").lower() == "true",
        )

    def default_filename(self) -> str:
        return f"{self.library_name}-{self.library_version}.zip"

    def resolve_output_path(self) -> Path:
        """
        Determine where the archive is saved.

        Returns:
            The configured path, the default filename inside it if it is a
            directory, or the default filename in the working directory
        """
        if self.output_path is None:
            return Path(self.default_filename())
        if self.output_path.is_dir():
            return self.output_path / self.default_filename()
        return self.output_path
