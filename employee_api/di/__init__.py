from .base_container import BaseContainer
from .container import DIContainer

__all__ = ["BaseContainer", "DIContainer"]
