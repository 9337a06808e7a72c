"""
Page Resolver - Maps each public route to its view result

Every function is stateless and never fails. Category filtering is left to
the template: the home view always carries the full catalog.
"""

from flask import current_app
from models import HomeView, SupportView, PrivacyView, PlainTextView
from utils.catalog import get_catalog
from utils.helpers import get_visitor_count


def resolve_home(category_filter=None):
    """
    Resolve the home page, optionally with a selected category

    Args:
        category_filter (str, optional): Selected category key. Unknown keys
            are passed through and simply match nothing.

    Returns:
        HomeView: Full catalog plus the raw selection
    """
    return HomeView(
        portfolios=get_catalog(),
        selected_category=category_filter,
        message=current_app.config.get('HOME_MESSAGE', '')
    )


def resolve_support():
    """Resolve the support page"""
    return SupportView(
        visitor_count=get_visitor_count(),
        message=current_app.config.get('SUPPORT_MESSAGE', 'Support')
    )


def resolve_privacy():
    """Resolve the privacy policy page"""
    return PrivacyView(message=current_app.config.get('PRIVACY_MESSAGE', 'Privacy Policy'))


def resolve_ads_verification():
    """Resolve app-ads.txt, served verbatim"""
    return PlainTextView(body=current_app.config['ADS_TXT'])
