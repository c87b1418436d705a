"""
Dependency injection container and default framework bindings.
"""

from .container import Binding, BindingKind, Container, get_container, reset_container
from .factories import register_defaults

__all__ = [
    'Binding',
    'BindingKind',
    'Container',
    'get_container',
    'reset_container',
    'register_defaults',
]
