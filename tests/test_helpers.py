from markupsafe import Markup

from models import VisitorCount
from utils.helpers import get_visitor_count, sanitize_description
from utils.status import STATUS_BADGES, get_status_badge
from utils.ui_helpers import get_page_specific_class, get_ui_config


def test_visitor_count_placeholder():
    assert get_visitor_count() == VisitorCount(total=0, unique=0)


def test_sanitize_plain_text_escapes_and_breaks_lines(app_ctx):
    result = sanitize_description('Tips & tricks\n\nLine two')

    assert isinstance(result, Markup)
    assert str(result) == 'Tips &amp; tricks<br>\nLine two'


def test_sanitize_keeps_allowed_tags(app_ctx):
    result = sanitize_description('Action RPG.<br><strong>Soon</strong>')

    assert str(result) == 'Action RPG.<br><strong>Soon</strong>'


def test_sanitize_strips_scripts_and_attributes(app_ctx):
    result = sanitize_description(
        '<p onclick="x()">Hi</p><script>alert(1)</script><a href="/">link</a>'
        '<span class="tag" style="color:red">x</span>'
    )

    assert str(result) == '<p>Hi</p>link<span class="tag">x</span>'


def test_sanitize_collapses_repeated_breaks(app_ctx):
    assert str(sanitize_description('<br>A<br><br><br>B<br>')) == 'A<br>\nB'


def test_sanitize_empty(app_ctx):
    assert sanitize_description('') == Markup('')
    assert sanitize_description(None) == Markup('')


def test_status_badges():
    assert get_status_badge('released')['label'] == 'Released'
    assert get_status_badge('coming-soon')['css_class'] == 'badge-coming-soon'
    assert get_status_badge('unknown') is STATUS_BADGES['released']


def test_page_specific_class():
    assert get_page_specific_class(None) == 'page-default'
    assert get_page_specific_class('pages') == 'page-pages'
    assert get_page_specific_class('pages', 'category') == 'page-pages page-pages-category'


def test_ui_config_defaults(app_ctx):
    config = get_ui_config()

    assert config['enable_animations'] is True
    assert config['default_theme'] == 'system'


def test_ui_config_rejects_unknown_theme(app):
    app.config['DEFAULT_THEME'] = 'neon'
    with app.app_context():
        assert get_ui_config()['default_theme'] == 'system'

    app.config['DEFAULT_THEME'] = 'dark'
    with app.app_context():
        assert get_ui_config()['default_theme'] == 'dark'


def test_sanitize_escapes_unclosed_tag(app_ctx):
    result = sanitize_description('<img src=x onerror=alert(1) ')

    assert '<' not in str(result)
    assert str(result).startswith('&lt;img')


def test_sanitize_escapes_stray_brackets_between_tags(app_ctx):
    result = sanitize_description('Damage <strong>x2</strong> when hp < 10')

    assert str(result) == 'Damage <strong>x2</strong> when hp &lt; 10'
