"""Override Resolver for finding the method a given method overrides or implements."""

from typing import List, Optional

from .model import DeclaredType, Method, Parameter
from .name_encoder import NameEncoder


class OverrideResolver:
    """Finds the ancestor or interface method a method overrides."""

    def __init__(self, encoder: Optional[NameEncoder] = None):
        self.encoder = encoder or NameEncoder()

    def find_overridden_method(
        self, method: Method, declaring_type: Optional[DeclaredType] = None
    ) -> Optional[Method]:
        """
        Find the method that is overridden or implemented by a given method.

        The model's own answer wins. Otherwise only the interfaces the declaring
        type lists directly are searched, in order, for a method with the same
        name and parameter types.

        Args:
            method: The overriding method
            declaring_type: The type declaring the method (defaults to the method's own)

        Returns:
            The overridden method or None if not found
        """
        if method.overridden_method is not None:
            return method.overridden_method

        declaring_type = declaring_type or method.declaring_type
        if declaring_type is None:
            return None

        for interface in declaring_type.interfaces:
            interface_doc = interface.declaration
            if interface_doc is None:
                continue

            for interface_method in interface_doc.methods:
                if interface_method.name != method.name:
                    continue
                if self._same_parameters(method.parameters, interface_method.parameters):
                    return interface_method

        return None

    def _same_parameters(self, parameters1: List[Parameter], parameters2: List[Parameter]) -> bool:
        """Compare two parameter lists by their type keys."""
        if len(parameters1) != len(parameters2):
            return False

        for one, two in zip(parameters1, parameters2):
            key = self.encoder.reference_key(one.type)
            if key is None or key != self.encoder.reference_key(two.type):
                return False

        return True
