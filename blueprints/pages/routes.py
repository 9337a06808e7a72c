"""
Pages Routes - Public pages
"""

from datetime import datetime
from flask import render_template, request, current_app, url_for
from markupsafe import escape
from utils.catalog import get_categories
from .resolver import resolve_home, resolve_support, resolve_privacy, resolve_ads_verification
from . import pages_bp


def render_view(view):
    """Render a resolved view with its data bag"""
    return render_template(view.template, view=view, **view.context())


def text_response(view):
    """Return a PlainTextView as a raw response"""
    response = current_app.make_response(view.body)
    response.headers['Content-Type'] = view.content_type
    return response


@pages_bp.route('/')
def index():
    """Home page - all categories"""
    return render_view(resolve_home())


@pages_bp.route('/category/<category>')
def category(category):
    """Home page with a selected category"""
    view = resolve_home(category)
    if not view.has_matches:
        current_app.logger.info(f"Unknown category requested: {category}")
    return render_view(view)


@pages_bp.route('/support')
def support():
    """Support page"""
    return render_view(resolve_support())


@pages_bp.route('/privacy')
def privacy():
    """Privacy Policy page"""
    return render_view(resolve_privacy())


@pages_bp.route('/app-ads.txt')
def app_ads():
    """Ad network verification file"""
    return text_response(resolve_ads_verification())


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for SEO"""
    lastmod = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [{
        'loc': url_for('pages.index', _external=True),
        'changefreq': 'weekly',
        'priority': '1.0'
    }]
    for name in get_categories():
        sitemap_entries.append({
            'loc': url_for('pages.category', category=name, _external=True),
            'changefreq': 'monthly',
            'priority': '0.8'
        })
    for endpoint in ('pages.support', 'pages.privacy'):
        sitemap_entries.append({
            'loc': url_for(endpoint, _external=True),
            'changefreq': 'yearly',
            'priority': '0.3'
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{escape(entry["loc"])}</loc>')
        sitemap_xml.append(f'<lastmod>{lastmod}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Disallow: /static/

Sitemap: """ + request.url_root.rstrip('/') + """/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
