"""
Base classes for application components.
"""

from .collection import Collection
from .component import Component
from .model import Model

__all__ = ['Collection', 'Component', 'Model']
