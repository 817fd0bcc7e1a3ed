"""Type Record Builder for converting a declared type into an XML record."""

import xml.etree.ElementTree as ET
from typing import Callable, Iterable, List, Optional, Tuple

from .markup_normalizer import MarkupNormalizer
from .model import Constructor, DeclaredType, Documented, Method, Parameter, TypeReference
from .name_encoder import NameEncoder
from .override_resolver import OverrideResolver

ANNOTATION_MARKER = "java.lang.annotation.Annotation"
DEPRECATED_ANNOTATION = "Deprecated"
SINCE_TAG = "@since"


def is_annotation(declared: DeclaredType) -> bool:
    """
    Determine if a type is an annotation type.

    The model's annotation category is not reliable, so the superclass chain of
    every directly implemented interface is checked for the annotation marker.
    """
    for interface in declared.interfaces:
        current: Optional[TypeReference] = interface
        seen = set()
        while current is not None and current.qualified_name not in seen:
            seen.add(current.qualified_name)
            if current.qualified_name == ANNOTATION_MARKER:
                return True
            current = current.declaration.superclass if current.declaration else None
    return False


def is_deprecated(element: Documented) -> bool:
    """Determine if a type or member carries an annotation named "Deprecated"."""
    return any(annotation.name == DEPRECATED_ANNOTATION for annotation in element.annotations)


def parse_since(element: Documented) -> Optional[str]:
    """Get the text of the first @since tag, if present."""
    tags = element.tags_named(SINCE_TAG)
    return tags[0].text if tags else None


# Checked in order, the first match wins. Interfaces get no kind because
# their modifiers already contain "interface".
KIND_RULES: Tuple[Tuple[str, Callable[[DeclaredType], bool]], ...] = (
    ("annotation", is_annotation),
    ("exception", lambda declared: declared.is_exception),
    ("enum", lambda declared: declared.is_enum),
    ("class", lambda declared: not declared.is_interface),
)


def classify(declared: DeclaredType) -> Optional[str]:
    for kind, matches in KIND_RULES:
        if matches(declared):
            return kind
    return None


class TypeRecordBuilder:
    """Builds the XML record of a single declared type."""

    def __init__(
        self,
        encoder: Optional[NameEncoder] = None,
        resolver: Optional[OverrideResolver] = None,
        normalizer: Optional[MarkupNormalizer] = None,
    ):
        self.encoder = encoder or NameEncoder()
        self.resolver = resolver or OverrideResolver(self.encoder)
        self.normalizer = normalizer or MarkupNormalizer()

    def build_document(self, declared: DeclaredType) -> ET.ElementTree:
        """Build the XML document holding a type's record."""
        return ET.ElementTree(self.build(declared))

    def build(self, declared: DeclaredType) -> ET.Element:
        """
        Build the record element of a declared type.

        Args:
            declared: The type to convert

        Returns:
            A <class> element with constructor and method children
        """
        element = ET.Element("class")
        self._set_attribute(element, "name", self.encoder.type_key(declared))

        modifiers: List[str] = []
        kind = classify(declared)
        if kind:
            modifiers.append(kind)
        modifiers.extend(m for m in declared.modifiers if m)
        if kind == "annotation":
            modifiers = [m for m in modifiers if m != "interface"]
        self._set_attribute(element, "modifiers", " ".join(modifiers))

        self._set_attribute(element, "extends", self.encoder.type_key(declared.superclass))
        self._set_type_attribute(element, "implements", declared.interfaces, with_dimensions=False)

        if is_deprecated(declared):
            element.set("deprecated", "true")
        self._set_attribute(element, "since", parse_since(declared))

        self._add_description(element, self.normalizer.to_markdown(declared.inline_tags))

        for constructor in declared.constructors:
            element.append(self._build_constructor(constructor))
        for method in declared.methods:
            element.append(self._build_method(method, declared))

        return element

    def _build_constructor(self, constructor: Constructor) -> ET.Element:
        element = ET.Element("constructor")

        if is_deprecated(constructor):
            element.set("deprecated", "true")
        self._set_type_attribute(element, "throws", constructor.thrown)
        self._set_attribute(element, "since", parse_since(constructor))

        self._add_description(element, self.normalizer.to_markdown(constructor.inline_tags))
        for parameter in constructor.parameters:
            element.append(self._build_parameter(parameter))

        return element

    def _build_method(self, method: Method, declared: DeclaredType) -> ET.Element:
        element = ET.Element("method")
        self._set_attribute(element, "name", method.name)
        self._set_attribute(element, "modifiers", " ".join(m for m in method.modifiers if m))

        if is_deprecated(method):
            element.set("deprecated", "true")

        if not self.encoder.is_void(method.return_type):
            self._set_attribute(element, "returns", self.encoder.reference_key(method.return_type))

        self._set_type_attribute(element, "throws", method.thrown)
        self._set_attribute(element, "since", parse_since(method))

        description_source: Documented = method
        overridden = self.resolver.find_overridden_method(method, declared)
        if overridden is not None:
            overridden_type = overridden.declaring_type
            if overridden_type is not None and overridden_type.is_package_private:
                # callers cannot see the overridden method, so inline its description
                description_source = overridden
            else:
                self._set_attribute(
                    element, "overrides", self.encoder.method_key(overridden, overridden_type)
                )
        self._add_description(
            element, self.normalizer.to_markdown(description_source.inline_tags)
        )

        for parameter in method.parameters:
            element.append(self._build_parameter(parameter))

        return element

    def _build_parameter(self, parameter: Parameter) -> ET.Element:
        element = ET.Element("parameter")
        self._set_attribute(element, "name", parameter.name)
        self._set_attribute(element, "type", self.encoder.reference_key(parameter.type))
        return element

    def _add_description(self, element: ET.Element, description: str) -> None:
        description_element = ET.SubElement(element, "description")
        description_element.text = description

    def _set_type_attribute(
        self,
        element: ET.Element,
        name: str,
        references: Iterable[TypeReference],
        with_dimensions: bool = True,
    ) -> None:
        """Set a space separated attribute of type keys (e.g. implements="java.io|Closeable java.lang|Runnable")."""
        encode = self.encoder.reference_key if with_dimensions else self.encoder.type_key
        self._set_attribute(element, name, self.encoder.join_keys(encode(r) for r in references))

    def _set_attribute(self, element: ET.Element, name: str, value: Optional[str]) -> None:
        """Set an attribute, skipping absent and empty values."""
        if value:
            element.set(name, value)
