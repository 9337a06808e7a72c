import json

import pytest

from models import Project, STATUS_COMING_SOON, STATUS_RELEASED
from utils.catalog import (
    CATALOG_EXTENSION_KEY,
    CatalogLoadError,
    build_catalog,
    get_catalog,
    get_categories,
    load_catalog_file,
)


def test_build_catalog_is_deterministic():
    first = build_catalog()
    second = build_catalog()

    assert dict(first) == dict(second)
    assert list(first.keys()) == list(second.keys())


def test_build_catalog_categories_in_display_order():
    assert list(build_catalog().keys()) == ['unity', 'unreal', 'graphic']


def test_first_unity_project_is_legacy_of_auras():
    unity = build_catalog()['unity']
    assert unity[0].title == 'Legacy of Auras'
    assert unity[0].status == STATUS_RELEASED


def test_catalog_contains_coming_soon_projects():
    statuses = {p.status for projects in build_catalog().values() for p in projects}
    assert STATUS_COMING_SOON in statuses


def test_catalog_is_read_only():
    catalog = build_catalog()
    with pytest.raises(TypeError):
        catalog['new'] = ()
    with pytest.raises(AttributeError):
        catalog['unity'].append(Project('x', 'y'))


def test_project_is_immutable():
    project = build_catalog()['unity'][0]
    with pytest.raises(AttributeError):
        project.title = 'Changed'


def test_project_structural_equality():
    assert Project('A', 'desc') == Project('A', 'desc', STATUS_RELEASED)
    assert Project('A', 'desc') != Project('A', 'desc', STATUS_COMING_SOON)


@pytest.mark.parametrize('kwargs', [
    {'title': '', 'description': 'd'},
    {'title': '   ', 'description': 'd'},
    {'title': 't', 'description': ''},
    {'title': 't', 'description': 'd', 'status': 'archived'},
])
def test_project_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        Project(**kwargs)


def test_load_catalog_file(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps({
        'godot': [
            {'title': 'Pixel Quest', 'description': 'Retro platformer'},
            {'title': 'Star Forge', 'description': 'Space sim', 'status': 'coming-soon'},
        ],
        'unity': [],
    }), encoding='utf-8')

    catalog = load_catalog_file(str(path))

    assert list(catalog.keys()) == ['godot', 'unity']
    assert [p.title for p in catalog['godot']] == ['Pixel Quest', 'Star Forge']
    assert catalog['godot'][1].is_coming_soon
    assert catalog['unity'] == ()


def test_load_catalog_file_missing(tmp_path):
    with pytest.raises(CatalogLoadError):
        load_catalog_file(str(tmp_path / 'missing.json'))


@pytest.mark.parametrize('content', [
    '{not json',
    '["unity"]',
    '{"unity": {"title": "x"}}',
    '{"unity": ["x"]}',
    '{"unity": [{"title": "", "description": "d"}]}',
    '{"unity": [{"title": "t", "description": "d", "status": "draft"}]}',
])
def test_load_catalog_file_invalid(tmp_path, content):
    path = tmp_path / 'catalog.json'
    path.write_text(content, encoding='utf-8')

    with pytest.raises(CatalogLoadError):
        load_catalog_file(str(path))


def test_load_catalog_file_not_utf8(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_bytes(b'\xff\xfe{}')

    with pytest.raises(CatalogLoadError):
        load_catalog_file(str(path))


def test_get_catalog_is_cached_per_app(app_ctx):
    first = get_catalog()
    second = get_catalog()

    assert first is second
    assert app_ctx.extensions[CATALOG_EXTENSION_KEY] is first
    assert dict(first) == dict(build_catalog())


def test_get_catalog_uses_catalog_file(app, tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps({
        'unreal': [{'title': 'Only One', 'description': 'Single project'}],
    }), encoding='utf-8')
    app.config['CATALOG_FILE'] = str(path)

    with app.app_context():
        catalog = get_catalog()

    assert list(catalog.keys()) == ['unreal']
    assert catalog['unreal'][0].title == 'Only One'


def test_get_catalog_falls_back_on_broken_file(app, tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text('{broken', encoding='utf-8')
    app.config['CATALOG_FILE'] = str(path)

    with app.app_context():
        catalog = get_catalog()

    assert dict(catalog) == dict(build_catalog())


def test_get_categories(app_ctx):
    assert get_categories() == ['unity', 'unreal', 'graphic']
