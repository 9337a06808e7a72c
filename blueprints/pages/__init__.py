"""
Pages Blueprint - Public pages
Handles: Home (all / by category), Support, Privacy, app-ads.txt, SEO files
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
