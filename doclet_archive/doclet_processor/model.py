"""Data classes for the documentation object model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

VISIBILITY_MODIFIERS = ("public", "protected", "private")


@dataclass
class Tag:
    """A documentation comment fragment or block tag."""

    name: str  # "Text" for plain prose, otherwise "@code", "@link", "@since", ...
    text: str = ""


@dataclass
class TypeReference:
    """Points at a type, either one in the processed model or an external one."""

    name: str
    package: Optional[str] = None
    enclosing: List[str] = field(default_factory=list)
    dimensions: int = 0
    declaration: Optional["DeclaredType"] = field(default=None, repr=False, compare=False)

    @property
    def qualified_name(self) -> str:
        parts = [self.package] if self.package else []
        return ".".join(parts + self.enclosing + [self.name])

    @classmethod
    def to(cls, declared: "DeclaredType", dimensions: int = 0) -> "TypeReference":
        """Create a resolved reference to a declared type."""
        return cls(
            name=declared.name,
            package=declared.package,
            enclosing=list(declared.enclosing),
            dimensions=dimensions,
            declaration=declared,
        )


@dataclass
class Documented:
    """Shared documentation data of types and members."""

    inline_tags: List[Tag] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)
    annotations: List[TypeReference] = field(default_factory=list)

    def tags_named(self, name: str) -> List[Tag]:
        return [tag for tag in self.tags if tag.name == name]


@dataclass
class Parameter:
    """A constructor or method parameter."""

    name: str
    type: TypeReference


@dataclass
class Member(Documented):
    """Shared data of constructors and methods."""

    parameters: List[Parameter] = field(default_factory=list)
    thrown: List[TypeReference] = field(default_factory=list)
    declaring_type: Optional["DeclaredType"] = field(default=None, repr=False, compare=False)


@dataclass
class Constructor(Member):
    pass


@dataclass
class Method(Member):
    name: str = ""
    modifiers: List[str] = field(default_factory=list)
    return_type: Optional[TypeReference] = None
    overridden_method: Optional["Method"] = field(default=None, repr=False, compare=False)


@dataclass
class DeclaredType(Documented):
    """A class, interface, enum, or annotation type."""

    name: str = ""
    package: Optional[str] = None
    enclosing: List[str] = field(default_factory=list)  # outermost first
    category: str = "class"  # class, interface, enum, exception, error, annotation
    modifiers: List[str] = field(default_factory=list)
    superclass: Optional[TypeReference] = None
    interfaces: List[TypeReference] = field(default_factory=list)
    constructors: List[Constructor] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)

    def __post_init__(self):
        """Attach the declaring type to every member."""
        for member in [*self.constructors, *self.methods]:
            member.declaring_type = self

    @property
    def qualified_name(self) -> str:
        parts = [self.package] if self.package else []
        return ".".join(parts + self.enclosing + [self.name])

    @property
    def is_interface(self) -> bool:
        return self.category in ("interface", "annotation")

    @property
    def is_exception(self) -> bool:
        return self.category == "exception"

    @property
    def is_enum(self) -> bool:
        return self.category == "enum"

    @property
    def is_package_private(self) -> bool:
        return not any(modifier in VISIBILITY_MODIFIERS for modifier in self.modifiers)


@dataclass
class LibraryManifest:
    """Summary of the library a generation run describes."""

    name: Optional[str]
    version: Optional[str]
    base_url: Optional[str] = None
    javadoc_url_pattern: Optional[str] = None
    project_url: Optional[str] = None
    generated: datetime = field(default_factory=lambda: datetime.now().astimezone())

    @classmethod
    def from_config(cls, config, now: Optional[datetime] = None) -> "LibraryManifest":
        """Create the manifest for a run from the archiver configuration."""
        now = now or datetime.now()
        if now.tzinfo is None:
            # naive times are local, the manifest always carries the offset
            now = now.astimezone()
        return cls(
            name=config.library_name,
            version=config.library_version,
            base_url=config.base_url,
            javadoc_url_pattern=config.javadoc_url_pattern,
            project_url=config.project_url,
            generated=now,
        )
