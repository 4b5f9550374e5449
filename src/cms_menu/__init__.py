"""CMS Menu - A hierarchical menu tree with uniform leaf and group entries."""

from .config import DisplaySettings, load_config
from .menu import MenuNode, LeafEntry, GroupEntry, new_leaf, new_group
from .tree import MenuTree

__all__ = ['MenuNode', 'LeafEntry', 'GroupEntry', 'new_leaf', 'new_group',
           'MenuTree', 'DisplaySettings', 'load_config']
