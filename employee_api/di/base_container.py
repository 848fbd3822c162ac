# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def has(self, interface: Union[Type, str]) -> bool:
        """Check whether a singleton is registered"""
        return interface in self.instances

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        raise ValueError(f"No registration found for {interface}")

    def close(self) -> None:
        """Release resources held by registered instances. No-op by default."""
