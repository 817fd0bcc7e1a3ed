"""Doclet processor for converting a library's documentation model into a record archive."""

from .archive_assembler import ArchiveAssembler, ProgressPrinter, manifest_element, record_path
from .config import ArchiverConfig
from .description_visitor import DescriptionVisitor, html_to_markdown
from .markup_normalizer import MarkupNormalizer, escape_html
from .model import (
    Constructor,
    DeclaredType,
    LibraryManifest,
    Method,
    Parameter,
    Tag,
    TypeReference,
)
from .name_encoder import NameEncoder, TypeKey
from .override_resolver import OverrideResolver
from .parser import ModelParser, ParseResult
from .processor import DocletProcessor
from .type_record_builder import TypeRecordBuilder, classify, is_annotation, is_deprecated

__all__ = [
    "ArchiveAssembler",
    "ArchiverConfig",
    "Constructor",
    "DeclaredType",
    "DescriptionVisitor",
    "DocletProcessor",
    "LibraryManifest",
    "MarkupNormalizer",
    "Method",
    "ModelParser",
    "NameEncoder",
    "OverrideResolver",
    "Parameter",
    "ParseResult",
    "ProgressPrinter",
    "Tag",
    "TypeKey",
    "TypeRecordBuilder",
    "TypeReference",
    "classify",
    "escape_html",
    "html_to_markdown",
    "is_annotation",
    "is_deprecated",
    "manifest_element",
    "record_path",
]
