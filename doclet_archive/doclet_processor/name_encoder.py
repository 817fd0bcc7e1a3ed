"""Name Encoder for building the cross-reference keys of types and methods."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from .model import DeclaredType, Method, TypeReference

PACKAGE_SEPARATOR = "|"
MEMBER_SEPARATOR = "#"
ARRAY_SUFFIX = "[]"
VOID = "void"


@dataclass
class TypeKey:
    """The parts a type key is built from."""

    simple_name: str
    package: Optional[str] = None
    enclosing: List[str] = field(default_factory=list)
    dimensions: int = 0


class NameEncoder:
    """Encodes types and methods as canonical string keys.

    A type key looks like ``java.util|Map.Entry``: the package, a pipe, then
    the enclosing types and the simple name joined with dots. The pipe keeps
    a nested type distinguishable from a top-level type in a deeper package.
    """

    def type_key(self, declared: Union[DeclaredType, TypeReference, None]) -> Optional[str]:
        """
        Build the key of a type, ignoring any array dimensions.

        Args:
            declared: A declared type or a reference to one

        Returns:
            Key string (e.g. "java.util|Map.Entry") or None if the type has no name
        """
        if declared is None or not declared.name:
            return None

        key = ""
        if declared.package:
            key += declared.package + PACKAGE_SEPARATOR
        if declared.enclosing:
            key += ".".join(declared.enclosing) + "."
        return key + declared.name

    def reference_key(self, reference: Optional[TypeReference]) -> Optional[str]:
        """Build the key of a type reference including its array suffix (e.g. "java.lang|String[]")."""
        key = self.type_key(reference)
        if key is None:
            return None
        return key + ARRAY_SUFFIX * max(reference.dimensions, 0)

    def method_key(
        self, method: Method, declaring_type: Optional[DeclaredType] = None
    ) -> Optional[str]:
        """
        Build the key of a method.

        Args:
            method: The method
            declaring_type: The type declaring the method (defaults to the method's own)

        Returns:
            Key string (e.g. "java.util|Map.Entry#equals(java.lang|Object)") or None
            if the declaring type is unknown
        """
        class_key = self.type_key(declaring_type or method.declaring_type)
        if class_key is None:
            return None

        parameter_keys = [self.reference_key(p.type) or "" for p in method.parameters]
        return f"{class_key}{MEMBER_SEPARATOR}{method.name}({', '.join(parameter_keys)})"

    def join_keys(self, keys: Iterable[Optional[str]]) -> Optional[str]:
        """Join keys for a multi-valued attribute, dropping missing ones."""
        present = [key for key in keys if key]
        return " ".join(present) if present else None

    def is_void(self, reference: Optional[TypeReference]) -> bool:
        return self.reference_key(reference) == VOID

    def decode(self, key: str) -> TypeKey:
        """
        Split a type key back into its parts.

        Args:
            key: Key string produced by reference_key()

        Returns:
            TypeKey holding package, enclosing types, simple name and dimensions
        """
        dimensions = 0
        while key.endswith(ARRAY_SUFFIX):
            key = key[: -len(ARRAY_SUFFIX)]
            dimensions += 1

        package, separator, rest = key.partition(PACKAGE_SEPARATOR)
        if not separator:
            package, rest = None, key

        names = rest.split(".")
        return TypeKey(
            simple_name=names[-1], package=package, enclosing=names[:-1], dimensions=dimensions
        )
