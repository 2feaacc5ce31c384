"""Documentation catalog navigation: slug trees and sidebar state."""

from .models.document import Document
from .models.tree import Folder, Leaf

__all__ = ["Document", "Folder", "Leaf"]
