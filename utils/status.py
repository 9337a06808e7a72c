"""
Status Module - Project release status badges
Handles badge labels, icons, and colors
"""

from models import STATUS_RELEASED, STATUS_COMING_SOON

STATUS_BADGES = {
    STATUS_RELEASED: {
        'label': 'Released',
        'icon': 'fa-check-circle',
        'css_class': 'badge-released',
        'bg_color': 'rgba(16, 185, 129, 0.1)',
        'text_color': '#10b981',
        'border_color': 'rgba(16, 185, 129, 0.3)'
    },
    STATUS_COMING_SOON: {
        'label': 'Coming Soon',
        'icon': 'fa-hourglass-half',
        'css_class': 'badge-coming-soon',
        'bg_color': 'rgba(245, 158, 11, 0.1)',
        'text_color': '#f59e0b',
        'border_color': 'rgba(245, 158, 11, 0.3)'
    }
}


def get_status_badge(status):
    """
    Get badge information for a project status

    Args:
        status (str): Project status (released, coming-soon)

    Returns:
        dict: Badge information or the released badge
    """
    return STATUS_BADGES.get(status, STATUS_BADGES[STATUS_RELEASED])


__all__ = [
    'STATUS_BADGES',
    'get_status_badge'
]
