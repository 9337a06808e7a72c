"""
Catalog Module - Built-in portfolio data grouped by category
Optionally replaced at startup by a read-only JSON file (CATALOG_FILE)
"""

import json
from types import MappingProxyType
from flask import current_app
from models import Project, STATUS_RELEASED, STATUS_COMING_SOON


CATALOG_EXTENSION_KEY = 'portfolio_catalog'


class CatalogLoadError(Exception):
    """Raised when an external catalog file cannot be read or validated"""


# Built-in catalog source, in display order
_PORTFOLIO_DATA = (
    ('unity', (
        ('Legacy of Auras',
         'A 2D action RPG built around an aura-combination combat system.<br>'
         'Players collect elemental auras and fuse them into new skills.',
         STATUS_RELEASED),
        ('Tiny Harvest',
         'A cozy farming simulator for mobile.<br>'
         'Seasonal crops, a day/night cycle and an offline progress system.',
         STATUS_RELEASED),
        ('Neon Runner',
         'Endless runner with procedurally generated tracks.<br>'
         'Features a global leaderboard and daily challenges.',
         STATUS_RELEASED),
        ('Dungeon Tactics',
         'Turn-based tactics game with a grid-based dungeon crawler.<br>'
         '<strong>Currently in development.</strong>',
         STATUS_COMING_SOON),
    )),
    ('unreal', (
        ('Frostbound',
         'Third-person survival adventure set in a frozen wasteland.<br>'
         'Built with Blueprints and C++ gameplay systems.',
         STATUS_RELEASED),
        ('Echoes of Steel',
         'First-person mech combat prototype.<br>'
         'Modular weapon loadouts and destructible environments.',
         STATUS_RELEASED),
        ('Silent Harbor',
         'Narrative horror game set in an abandoned port town.<br>'
         '<strong>Currently in development.</strong>',
         STATUS_COMING_SOON),
    )),
    ('graphic', (
        ('Stylized Toon Shader',
         'Custom cel-shading pipeline with outline and rim-light passes.<br>'
         'Written for the Universal Render Pipeline.',
         STATUS_RELEASED),
        ('Procedural Terrain',
         'GPU-driven terrain generation using compute shaders.<br>'
         'Supports erosion simulation and biome blending.',
         STATUS_RELEASED),
        ('Volumetric Clouds',
         'Real-time raymarched cloud rendering.<br>'
         'Weather maps drive density, coverage and lighting.',
         STATUS_RELEASED),
    )),
)


def _freeze(mapping):
    """Wrap a category -> project list dict into a read-only catalog"""
    return MappingProxyType({
        category: tuple(projects) for category, projects in mapping.items()
    })


def build_catalog():
    """
    Build the built-in portfolio catalog

    Returns:
        MappingProxyType: category -> tuple of Project, in display order
    """
    catalog = {}
    for category, entries in _PORTFOLIO_DATA:
        catalog[category] = [
            Project(title=title, description=description, status=status)
            for title, description, status in entries
        ]
    return _freeze(catalog)


def load_catalog_file(path):
    """
    Load a catalog from a JSON file

    Expected format:
        {"unity": [{"title": "...", "description": "...", "status": "released"}, ...]}

    Args:
        path (str): Path to the JSON file

    Returns:
        MappingProxyType: category -> tuple of Project

    Raises:
        CatalogLoadError: If the file is missing, malformed or invalid
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogLoadError(f'Could not read catalog file {path}: {e}') from e

    if not isinstance(raw, dict):
        raise CatalogLoadError(f'Catalog file {path} must contain a JSON object')

    catalog = {}
    for category, entries in raw.items():
        if not isinstance(entries, list):
            raise CatalogLoadError(f'Category "{category}" must be a list of projects')
        projects = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise CatalogLoadError(f'Invalid project entry in "{category}": {entry!r}')
            try:
                projects.append(Project(
                    title=entry.get('title', ''),
                    description=entry.get('description', ''),
                    status=entry.get('status', STATUS_RELEASED)
                ))
            except (TypeError, ValueError, AttributeError) as e:
                raise CatalogLoadError(f'Invalid project in "{category}": {e}') from e
        catalog[category] = projects

    return _freeze(catalog)


def get_catalog():
    """
    Get the catalog for the current application, building it on first use

    The result is cached on the app and never mutated afterwards.
    A broken CATALOG_FILE falls back to the built-in catalog.
    """
    app = current_app._get_current_object()
    catalog = app.extensions.get(CATALOG_EXTENSION_KEY)
    if catalog is not None:
        return catalog

    catalog_file = app.config.get('CATALOG_FILE')
    if catalog_file:
        try:
            catalog = load_catalog_file(catalog_file)
            app.logger.info(f"✓ Catalog loaded from {catalog_file}")
        except CatalogLoadError as e:
            app.logger.error(f"✗ {e} - using built-in catalog")
            catalog = build_catalog()
    else:
        catalog = build_catalog()
        app.logger.info("✓ Built-in catalog initialized")

    app.logger.debug(
        f"Catalog: {len(catalog)} categories, "
        f"{sum(len(p) for p in catalog.values())} projects")

    app.extensions[CATALOG_EXTENSION_KEY] = catalog
    return catalog


def get_categories():
    """Get category keys in display order"""
    return list(get_catalog().keys())


__all__ = [
    'CatalogLoadError',
    'build_catalog',
    'load_catalog_file',
    'get_catalog',
    'get_categories'
]
