"""
UI Helper Functions
===================

Values injected into every template for the client-side theme and
animation scripts.
"""

from flask import request, current_app
from typing import Dict, Optional


THEMES = ('light', 'dark')


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    Get the CSS class for the current page, used on <body>

    Args:
        blueprint_name: Blueprint name
        route_name: Route name (optional)

    Returns:
        str: CSS class for the page

    Example:
        >>> get_page_specific_class('pages', 'category')
        'page-pages page-pages-category'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


def get_ui_config() -> Dict[str, object]:
    """
    Get general UI settings

    Returns:
        dict: UI settings:
            - enable_animations: toggles parallax/decorative animations
            - default_theme: theme used until the visitor picks one
              ('system' follows prefers-color-scheme)
    """
    default_theme = current_app.config.get('DEFAULT_THEME', 'system')
    if default_theme not in THEMES:
        default_theme = 'system'
    return {
        'enable_animations': current_app.config.get('ENABLE_ANIMATIONS', True),
        'default_theme': default_theme,
    }


def inject_page_class() -> str:
    """Page class for the active request"""
    route_name = request.endpoint.split('.')[-1] if request.endpoint else None
    return get_page_specific_class(request.blueprint, route_name)


__all__ = [
    'get_page_specific_class',
    'get_ui_config',
    'inject_page_class'
]
