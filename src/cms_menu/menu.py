"""Menu structure and node representation."""
import logging
from abc import ABC, abstractmethod

from .config import DisplaySettings

logger = logging.getLogger(__name__)


class MenuNode(ABC):
    """Common contract for every entry in the menu tree.

    Leaves and groups expose the same operations, so callers can render,
    count, disable and search any node without knowing which kind it is.
    """

    def __init__(self, title, icon=""):
        if not isinstance(title, str) or not title:
            raise ValueError(f"Menu title must be a non-empty string, got {title!r}")
        self.title = title
        self.icon = icon
        self.active = True

    def _prefix(self, indent_level, settings):
        indentation = " " * (indent_level * settings.indent_width)
        marker = settings.active_marker if self.active else settings.inactive_marker
        return f"{indentation}[{marker}] {self.icon} {self.title}"

    @abstractmethod
    def render(self, indent_level=0, emit=print, settings=None):
        """Emit this node (and anything beneath it) as text lines.

        Args:
            indent_level: Depth of this node, 0 for top-level entries
            emit: Callable receiving each rendered line
            settings: DisplaySettings, defaults are used when omitted
        """

    @abstractmethod
    def count_items(self):
        """Return the number of leaf entries in this subtree."""

    @abstractmethod
    def disable_all(self):
        """Mark this node and every descendant as inactive."""

    @abstractmethod
    def find_by_url(self, url):
        """Return the first leaf in pre-order whose url matches, or None."""

    def __repr__(self):
        return f"<{self.__class__.__name__} title={self.title!r} active={self.active}>"


class LeafEntry(MenuNode):
    """A single navigable link."""

    def __init__(self, title, url, icon=""):
        super().__init__(title, icon)
        self._url = url

    @property
    def url(self):
        return self._url

    def render(self, indent_level=0, emit=print, settings=None):
        settings = settings or DisplaySettings()
        emit(f"{self._prefix(indent_level, settings)} {settings.url_separator} {self.url}")

    def count_items(self):
        return 1

    def disable_all(self):
        self.active = False

    def find_by_url(self, url):
        if self.url == url:
            return self
        return None


class GroupEntry(MenuNode):
    """A named container holding leaves and further groups."""

    def __init__(self, title, icon=""):
        super().__init__(title, icon)
        self.children = []

    def add_child(self, node):
        """Append a node of any kind to this group.

        Returns:
            The added node, so nested groups can be built inline
        """
        if not isinstance(node, MenuNode):
            raise TypeError(f"Expected a MenuNode, got {node!r}")
        self.children.append(node)
        logger.debug(f"Added {node!r} to group '{self.title}'")
        return node

    def render(self, indent_level=0, emit=print, settings=None):
        settings = settings or DisplaySettings()
        emit(f"{self._prefix(indent_level, settings)} {settings.group_marker}")
        for child in self.children:
            child.render(indent_level + 1, emit, settings)

    def count_items(self):
        return sum(child.count_items() for child in self.children)

    def disable_all(self):
        for child in self.children:
            child.disable_all()
        self.active = False
        logger.debug(f"Disabled group '{self.title}' and {len(self.children)} child node(s)")

    def find_by_url(self, url):
        for child in self.children:
            found = child.find_by_url(url)
            if found is not None:
                return found
        return None


def new_leaf(title, url, icon=""):
    """Create a link entry pointing at url."""
    return LeafEntry(title, url, icon)


def new_group(title, icon=""):
    """Create an empty group entry."""
    return GroupEntry(title, icon)
