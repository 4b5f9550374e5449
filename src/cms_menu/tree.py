"""Top-level menu manager."""
import logging

from .config import DisplaySettings
from .menu import MenuNode

logger = logging.getLogger(__name__)


class MenuTree:
    """Holds the top-level entries and runs operations across all of them."""

    def __init__(self, emit=print, settings=None):
        self.top_level_items = []
        self.emit = emit
        self.settings = settings or DisplaySettings()

    def add_item(self, node):
        if not isinstance(node, MenuNode):
            raise TypeError(f"Expected a MenuNode, got {node!r}")
        self.top_level_items.append(node)
        logger.debug(f"Added top-level item {node!r}")
        return node

    def render_menu(self):
        self.emit(self.settings.banner)
        for node in self.top_level_items:
            node.render(0, self.emit, self.settings)

    def get_total_items(self):
        return sum(node.count_items() for node in self.top_level_items)

    def find_item_by_url(self, url):
        for node in self.top_level_items:
            found = node.find_by_url(url)
            if found is not None:
                return found
        logger.debug(f"No menu item found for url '{url}'")
        return None

    def disable_item(self, title):
        """Disable the top-level entry with the given title and its subtree.

        Returns:
            The disabled node, or None if no top-level entry has that title
        """
        for node in self.top_level_items:
            if node.title == title:
                node.disable_all()
                logger.debug(f"Disabled '{title}' and its {node.count_items()} item(s)")
                return node
        return None
