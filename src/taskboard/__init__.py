"""
Taskboard Backend
Project and to-do tracking over GraphQL
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
