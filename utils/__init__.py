"""
Utils Package - Centralized utility modules initialization
"""

from .catalog import (
    CatalogLoadError,
    build_catalog,
    load_catalog_file,
    get_catalog,
    get_categories
)
from .status import STATUS_BADGES, get_status_badge
from .helpers import get_visitor_count, sanitize_description
from .ui_helpers import (
    get_page_specific_class,
    get_ui_config,
    inject_page_class
)

__all__ = [
    # Catalog
    'CatalogLoadError',
    'build_catalog',
    'load_catalog_file',
    'get_catalog',
    'get_categories',

    # Status badges
    'STATUS_BADGES',
    'get_status_badge',

    # Helpers
    'get_visitor_count',
    'sanitize_description',

    # UI Helpers
    'get_page_specific_class',
    'get_ui_config',
    'inject_page_class'
]
