import sys
import argparse
import logging
from pathlib import Path

# Local imports
from .config import DisplaySettings, load_config
from .menu import new_group, new_leaf
from .tree import MenuTree

# Setup Logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def build_sample_menu(tree):
    """Populate a tree with the stock CMS navigation."""
    tree.add_item(new_leaf("Home", "/", "🏠"))

    products = new_group("Produtos", "📦")
    products.add_child(new_leaf("Todos", "/produtos"))
    products.add_child(new_leaf("Categorias", "/categorias"))
    products.add_child(new_leaf("Ofertas", "/ofertas"))

    clothing = products.add_child(new_group("Roupas", "👕"))
    clothing.add_child(new_leaf("Camisetas", "/roupas/camisetas"))
    clothing.add_child(new_leaf("Calças", "/roupas/calcas"))
    tree.add_item(products)

    admin = new_group("Administração", "⚙️")
    admin.add_child(new_leaf("Usuários", "/admin/usuarios"))
    admin.add_child(new_leaf("Configurações", "/admin/config"))
    tree.add_item(admin)
    return tree


def _load_settings(path):
    if path is None:
        return DisplaySettings()
    try:
        return DisplaySettings.from_config(load_config(path))
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(description="CMS menu tree")
    parser.add_argument("--config", type=Path, help="Path to YAML display config")
    parser.add_argument("--find", metavar="URL", help="Look up a menu item by url")
    parser.add_argument("--disable", metavar="TITLE", help="Disable a top-level entry and everything under it")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    tree = build_sample_menu(MenuTree(settings=_load_settings(args.config)))

    if args.disable and tree.disable_item(args.disable) is None:
        logger.warning(f"No top-level entry titled '{args.disable}'")

    tree.render_menu()
    print(f"\nTotal de itens no menu: {tree.get_total_items()}")

    if args.find:
        item = tree.find_item_by_url(args.find)
        if item is not None:
            print(f"\n✓ Item encontrado: {item.title}")
        else:
            print(f"\n✗ Nenhum item encontrado para {args.find}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
