"""
Utility Functions and Helpers

Configuration and mesh file handling.
"""

from .config_manager import ConfigManager
from .mesh_loader import load_mesh

__all__ = ['ConfigManager', 'load_mesh']
