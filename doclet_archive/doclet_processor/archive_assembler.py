"""Archive Assembler for writing the records of a whole library into one ZIP file."""

import io
import logging
import os
import sys
import tempfile
import xml.etree.ElementTree as ET
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import ArchiverConfig
from .model import DeclaredType, LibraryManifest
from .type_record_builder import TypeRecordBuilder

logger = logging.getLogger(__name__)

INFO_FILENAME = "info.xml"
GENERATED_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
WINDOWS_OS = os.name == "nt"

# A note about threading: the documentation model loads relationships such as
# superclasses and packages lazily and without locking. Every type is built
# and written by the single loop in ArchiveAssembler.assemble(), one after
# the other. Do not parallelize it.


def record_path(declared: DeclaredType) -> str:
    """
    Build the path of a type's record inside the archive.

    Nested type names are joined with dots instead of becoming directories, so
    "java.util.Map.Entry" is saved as "java/util/Map.Entry.xml".

    Args:
        declared: The type

    Returns:
        The path string
    """
    path = ""
    if declared.package:
        path += declared.package.replace(".", "/") + "/"
    for enclosing in declared.enclosing:
        path += enclosing + "."
    return path + declared.name + ".xml"


def default_file_mode() -> int:
    """Get the mode a newly created file receives under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def manifest_element(manifest: LibraryManifest) -> ET.Element:
    """Build the <info> element describing the library."""
    element = ET.Element("info")
    for name, value in (
        ("name", manifest.name),
        ("version", manifest.version),
        ("baseUrl", manifest.base_url),
        ("javadocUrlPattern", manifest.javadoc_url_pattern),
        ("projectUrl", manifest.project_url),
    ):
        if value:
            element.set(name, value)
    element.set("generated", manifest.generated.strftime(GENERATED_FORMAT))
    return element


class ProgressPrinter:
    """Outputs the status of the record generation on one line."""

    def __init__(self, total_classes: int, stream: Optional[TextIO] = None):
        self.total_classes = total_classes
        self.classes_parsed = 0
        self.stream = stream or sys.stdout

    def print(self, next_class: DeclaredType) -> None:
        self.classes_parsed += 1
        # Windows only moves the cursor back, it does not clear the line
        line = "\r" if WINDOWS_OS else "\r\033[K"
        line += f"Parsing {self.classes_parsed}/{self.total_classes} ({next_class.name})"
        if WINDOWS_OS:
            line = line.ljust(80)
        self.stream.write(line)
        self.stream.flush()

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()


class ArchiveAssembler:
    """Writes one record per type plus the library manifest into a ZIP archive."""

    def __init__(self, config: ArchiverConfig, builder: Optional[TypeRecordBuilder] = None):
        self.config = config
        self.builder = builder or TypeRecordBuilder()

    def assemble(self, types: Sequence[DeclaredType], now: Optional[datetime] = None) -> Path:
        """
        Generate the archive for a library.

        The archive is written to a staging file next to the output path and
        only moved into place once every record has been written. On failure
        the staging file is deleted and the error is re-raised.

        Args:
            types: All declared types of the library
            now: Generation time (defaults to the current time)

        Returns:
            Path to the finished archive
        """
        output_path = self.config.resolve_output_path()
        manifest = LibraryManifest.from_config(self.config, now)
        logger.info(f"Saving to: {output_path}")

        output_dir = output_path.parent
        output_dir.mkdir(parents=True, exist_ok=True)
        fd, staging_name = tempfile.mkstemp(
            prefix=".doclet-archive-", suffix=".zip", dir=str(output_dir)
        )
        os.close(fd)
        staging_path = Path(staging_name)

        try:
            with zipfile.ZipFile(staging_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                self._write_records(archive, types, manifest)
                self._write_document(archive, INFO_FILENAME, manifest_element(manifest), manifest)
            # mkstemp creates the file readable by its owner only
            os.chmod(staging_path, default_file_mode())
            os.replace(staging_path, output_path)
        except BaseException as e:
            logger.error(f"Failed to generate archive {output_path}: {e}")
            staging_path.unlink(missing_ok=True)
            raise

        logger.info(f"Wrote {len(types)} type records to {output_path}")
        return output_path

    def _write_records(
        self, archive: zipfile.ZipFile, types: Sequence[DeclaredType], manifest: LibraryManifest
    ) -> None:
        logger.info(f"Generating records for {len(types)} types")
        progress = ProgressPrinter(len(types)) if self.config.log_progress else None

        for declared in types:
            if progress:
                progress.print(declared)
            element = self.builder.build(declared)
            self._write_document(archive, record_path(declared), element, manifest)

        if progress:
            progress.finish()

    def _write_document(
        self, archive: zipfile.ZipFile, path: str, element: ET.Element, manifest: LibraryManifest
    ) -> None:
        """Serialize an element and store it in the archive."""
        info = zipfile.ZipInfo(path, date_time=self._zip_timestamp(manifest.generated))
        info.compress_type = zipfile.ZIP_DEFLATED
        archive.writestr(info, self.serialize(element))

    def serialize(self, element: ET.Element) -> bytes:
        """Convert an element to XML bytes, indented when pretty printing is on."""
        tree = ET.ElementTree(element)
        if self.config.pretty_print:
            ET.indent(tree, space="  ")
        buffer = io.BytesIO()
        tree.write(buffer, encoding="UTF-8", xml_declaration=True)
        return buffer.getvalue()

    def _zip_timestamp(self, generated: datetime):
        # ZIP timestamps cannot predate 1980
        return max(generated.timetuple()[:6], (1980, 1, 1, 0, 0, 0))
