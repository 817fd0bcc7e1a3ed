"""Main Doclet Processor orchestrating model loading and archive generation."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .archive_assembler import ArchiveAssembler
from .config import ArchiverConfig
from .model import DeclaredType
from .parser import ModelParser
from .type_record_builder import TypeRecordBuilder
from ..utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class DocletProcessor:
    """Main orchestrator for turning a documentation model into an archive."""

    def __init__(self, config: Optional[ArchiverConfig] = None, verbose: Optional[bool] = None):
        """
        Initialize the doclet processor.

        Args:
            config: Library and output settings (defaults to the environment)
            verbose: Configure logging to stderr at INFO (True) or ERROR (False) level
        """
        if verbose is not None:
            setup_logging(verbose)
        self.config = config or ArchiverConfig.from_env()

        # Initialize subcomponents
        self.parser = ModelParser()
        self.builder = TypeRecordBuilder()
        self.assembler = ArchiveAssembler(self.config, self.builder)

    def process_file(self, model_path: Union[str, Path]) -> Path:
        """
        Main entry point - load a model dump and write its archive.

        Args:
            model_path: JSON or YAML dump of the documentation model

        Returns:
            Path to the generated archive
        """
        logger.info(f"Loading documentation model from: {model_path}")
        parse_result = self.parser.parse_file(model_path)
        if not parse_result.success:
            raise ValueError(f"Unable to load documentation model: {parse_result.error}")

        logger.info(f"Found {len(parse_result.types)} declared types")
        return self.process_types(parse_result.types)

    def process_types(self, types: Sequence[DeclaredType]) -> Path:
        """Write the archive for already loaded types."""
        return self.assembler.assemble(types)
