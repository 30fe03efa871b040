"""
Content Sources

Loading folder and project lists for the virtual filesystem.

Modules:
    loader: JSON snapshot reading and writing
"""

from termfolio.content.loader import load_content, save_content

__all__ = ["load_content", "save_content"]
