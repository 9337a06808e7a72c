"""
Helpers Module - Utility functions for common operations
"""

import re
from flask import current_app
from markupsafe import Markup, escape
from models import VisitorCount


ALLOWED_TAGS = ['p', 'br', 'strong', 'em', 'ul', 'ol', 'li', 'span', 'b', 'i', 'u']
SAFE_TAG_RE = re.compile(
    r'</?(?:' + '|'.join(ALLOWED_TAGS) + r')(?: class="[a-zA-Z0-9_\-\s]*")?>', re.I)


def get_visitor_count():
    """Get visitor counters for the support page

    Not wired to real tracking yet, always zero.
    """
    return VisitorCount(total=0, unique=0)


def sanitize_description(text):
    """Sanitize a project description for safe rendering.

    - Removes <script> and <style> blocks
    - Preserves a small set of safe tags (p, br, strong, em, ul, ol, li, span)
    - Keeps `class` attribute only on <span> elements
    - Escapes stray '<' and '>' that do not form an allowed tag
    - If input contains no HTML, escapes it and converts newlines into <br>
    """
    try:
        if not text:
            return Markup('')

        txt = text.replace('\r\n', '\n').replace('\r', '\n').strip()

        # Remove script/style blocks entirely
        txt = re.sub(r'<(script|style).*?>.*?</\1>', '', txt, flags=re.I | re.S)

        if '<' not in txt and '>' not in txt:
            lines = [line.strip() for line in str(escape(txt)).split('\n')]
            return Markup('<br>\n'.join(line for line in lines if line))

        # Remove all tags that are not allowed, keep their inner text
        txt = re.sub(r'<(?!/?(?:' + '|'.join(ALLOWED_TAGS) + r')\b)[^>]*>', '', txt, flags=re.I)

        def _strip_attrs(match):
            tag = match.group(1).lower()
            attrs = match.group(2) or ''
            if tag == 'span':
                m = re.search(r'class\s*=\s*"([^"]+)"', attrs)
                cls = ''
                if m:
                    cls_val = re.sub(r'[^a-zA-Z0-9_\-\s]', '', m.group(1))
                    cls = f' class="{cls_val}"'
                return f'<{tag}{cls}>'
            return f'<{tag}>'

        txt = re.sub(r'<(\w+)([^>]*)>', _strip_attrs, txt, flags=re.I)

        # Escape everything that is not a well-formed allowed tag
        parts = []
        last = 0
        for m in SAFE_TAG_RE.finditer(txt):
            parts.append(str(escape(txt[last:m.start()])))
            parts.append(m.group(0))
            last = m.end()
        parts.append(str(escape(txt[last:])))
        txt = ''.join(parts)

        # Collapse repeated <br>
        txt = re.sub(r'(?:(?:<br\s*/?>)\s*){2,}', '<br>\n', txt, flags=re.I)
        txt = re.sub(r'^(?:\s|(?:<br\s*/?>))+', '', txt, flags=re.I)
        txt = re.sub(r'(?:\s|(?:<br\s*/?>))+$', '', txt, flags=re.I)

        return Markup(txt)
    except Exception as e:
        current_app.logger.error(f"Error sanitizing description: {str(e)}")
        return Markup('')


__all__ = [
    'get_visitor_count',
    'sanitize_description'
]
