"""Model Parser for documentation model dumps in JSON and YAML format."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .model import Constructor, DeclaredType, Method, Parameter, Tag, TypeReference
from .name_encoder import PACKAGE_SEPARATOR, NameEncoder

logger = logging.getLogger(__name__)


def _entries(values: Any) -> List[Dict[str, Any]]:
    return [value for value in values or [] if isinstance(value, dict)]


@dataclass
class ParseResult:
    """Result of parsing a documentation model dump."""

    success: bool
    types: List[DeclaredType] = None
    error: str = None
    file_type: str = None  # 'json' or 'yaml'


class ModelParser:
    """Loads the declared types of a library from a JSON or YAML dump."""

    def __init__(self, encoder: Optional[NameEncoder] = None):
        self.encoder = encoder or NameEncoder()

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse a documentation model dump.

        Args:
            file_path: Path to the dump (.json, .yaml, .yml)

        Returns:
            ParseResult with the declared types or error information
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return ParseResult(success=False, error=f"File not found: {file_path}")

        if not file_path.is_file():
            return ParseResult(success=False, error=f"Path is not a file: {file_path}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return ParseResult(success=False, error=f"Unable to read file as UTF-8: {e}")
        except OSError as e:
            return ParseResult(success=False, error=f"Error reading file: {e}")

        file_type = self._get_file_type(file_path)
        if file_type == "json":
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                return ParseResult(success=False, error=f"Invalid JSON format: {e}", file_type=file_type)
        elif file_type == "yaml":
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                return ParseResult(success=False, error=f"Invalid YAML format: {e}", file_type=file_type)
        else:
            return ParseResult(success=False, error=f"Unsupported file extension: {file_path.suffix}")

        result = self.parse_data(data)
        result.file_type = file_type
        return result

    def parse_data(self, data: Any) -> ParseResult:
        """
        Build the declared types from already decoded dump data.

        Args:
            data: Mapping with a "types" list

        Returns:
            ParseResult with the declared types or error information
        """
        if not isinstance(data, dict) or not isinstance(data.get("types"), list):
            return ParseResult(success=False, error="Model dump must be a mapping with a 'types' list")

        entries = [entry for entry in _entries(data["types"]) if self._has_simple_name(entry)]
        types = [self._build_type(entry) for entry in entries]

        # Second pass: link references to types and methods found in the dump
        type_index = {self.encoder.type_key(declared): declared for declared in types}
        method_index = {
            self.encoder.method_key(method): method for declared in types for method in declared.methods
        }
        for declared in types:
            self._link_type(declared, type_index)
        for entry, declared in zip(entries, types):
            self._link_overrides(entry, declared, method_index)

        logger.debug(f"Loaded {len(types)} types from model dump")
        return ParseResult(success=True, types=types)

    def _get_file_type(self, file_path: Path) -> str:
        """Determine file type from extension."""
        extension = file_path.suffix.lower()
        if extension == ".json":
            return "json"
        elif extension in [".yaml", ".yml"]:
            return "yaml"
        else:
            return "unknown"

    def _has_simple_name(self, entry: Dict[str, Any]) -> bool:
        """Check a type entry has a name without dots, which would collide with nested type keys."""
        name = str(entry.get("name") or "")
        if "." in name:
            logger.warning(f"Skipping type with dotted simple name: {name}")
            return False
        return True

    def _build_type(self, entry: Dict[str, Any]) -> DeclaredType:
        return DeclaredType(
            name=str(entry.get("name") or ""),
            package=entry.get("package") or None,
            enclosing=self._names(entry.get("enclosing")),
            category=entry.get("category") or "class",
            modifiers=self._modifiers(entry.get("modifiers")),
            superclass=self._reference(entry.get("superclass")),
            interfaces=self._references(entry.get("interfaces")),
            constructors=[self._build_constructor(c) for c in _entries(entry.get("constructors"))],
            methods=[self._build_method(m) for m in _entries(entry.get("methods"))],
            **self._documentation(entry),
        )

    def _build_constructor(self, entry: Dict[str, Any]) -> Constructor:
        return Constructor(
            parameters=self._parameters(entry.get("parameters")),
            thrown=self._references(entry.get("throws")),
            **self._documentation(entry),
        )

    def _build_method(self, entry: Dict[str, Any]) -> Method:
        return Method(
            name=str(entry.get("name") or ""),
            modifiers=self._modifiers(entry.get("modifiers")),
            return_type=self._reference(entry.get("returns")),
            parameters=self._parameters(entry.get("parameters")),
            thrown=self._references(entry.get("throws")),
            **self._documentation(entry),
        )

    def _documentation(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "inline_tags": self._tags(entry.get("inline_tags")),
            "tags": self._tags(entry.get("tags")),
            "annotations": self._references(entry.get("annotations")),
        }

    def _tags(self, values: Any) -> List[Tag]:
        tags = []
        for value in values or []:
            if isinstance(value, str):
                tags.append(Tag(name="Text", text=value))
            elif isinstance(value, dict) and value.get("name"):
                tags.append(Tag(name=value["name"], text=str(value.get("text") or "")))
        return tags

    def _parameters(self, values: Any) -> List[Parameter]:
        parameters = []
        for value in values or []:
            if not isinstance(value, dict):
                continue
            reference = self._reference(value.get("type"))
            if reference is not None:
                parameters.append(Parameter(name=str(value.get("name") or ""), type=reference))
        return parameters

    def _names(self, value: Any) -> List[str]:
        if isinstance(value, str):
            return [name for name in value.split(".") if name]
        return [str(name) for name in value or []]

    def _modifiers(self, value: Any) -> List[str]:
        if isinstance(value, str):
            return value.split()
        return [str(modifier) for modifier in value or []]

    def _references(self, values: Any) -> List[TypeReference]:
        references = [self._reference(value) for value in values or []]
        return [reference for reference in references if reference is not None]

    def _reference(self, value: Any) -> Optional[TypeReference]:
        """
        Convert a reference string into a TypeReference.

        Accepts type keys ("java.util|Map.Entry[]"), qualified names of
        top-level types ("java.lang.String") and primitives ("int").
        """
        if not isinstance(value, str) or not value.strip():
            return None

        key = self.encoder.decode(value.strip())
        if PACKAGE_SEPARATOR not in value and key.enclosing:
            key.package = ".".join(key.enclosing)
            key.enclosing = []
        if not key.simple_name:
            return None

        return TypeReference(
            name=key.simple_name,
            package=key.package or None,
            enclosing=key.enclosing,
            dimensions=key.dimensions,
        )

    def _link_type(self, declared: DeclaredType, type_index: Dict[str, DeclaredType]) -> None:
        references = [declared.superclass, *declared.interfaces, *declared.annotations]
        for member in [*declared.constructors, *declared.methods]:
            references.extend(p.type for p in member.parameters)
            references.extend(member.thrown)
            references.extend(member.annotations)
            if isinstance(member, Method):
                references.append(member.return_type)

        for reference in references:
            if reference is not None:
                reference.declaration = type_index.get(self.encoder.type_key(reference))

    def _link_overrides(
        self, entry: Dict[str, Any], declared: DeclaredType, method_index: Dict[str, Method]
    ) -> None:
        for method_entry, method in zip(_entries(entry.get("methods")), declared.methods):
            overrides = method_entry.get("overrides")
            if not overrides:
                continue
            overridden = method_index.get(overrides)
            if overridden is None:
                logger.debug(f"Unknown overridden method {overrides} on {declared.qualified_name}")
            method.overridden_method = overridden
