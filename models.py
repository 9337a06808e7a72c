"""
Models Module - Portfolio records and per-route view results
"""

from dataclasses import dataclass
from typing import Mapping, NamedTuple, Optional, Tuple


STATUS_RELEASED = 'released'
STATUS_COMING_SOON = 'coming-soon'
PROJECT_STATUSES = (STATUS_RELEASED, STATUS_COMING_SOON)


@dataclass(frozen=True)
class Project:
    """One portfolio entry"""
    title: str
    description: str
    status: str = STATUS_RELEASED

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError('Project title must not be empty')
        if not self.description or not self.description.strip():
            raise ValueError(f'Project "{self.title}" has an empty description')
        if self.status not in PROJECT_STATUSES:
            raise ValueError(f'Unknown project status: {self.status!r}')

    @property
    def is_coming_soon(self) -> bool:
        return self.status == STATUS_COMING_SOON

    def to_dict(self):
        return {
            'title': self.title,
            'description': self.description,
            'status': self.status
        }


# category key -> projects in display order
Catalog = Mapping[str, Tuple[Project, ...]]


class VisitorCount(NamedTuple):
    # Not backed by real tracking yet
    total: int = 0
    unique: int = 0


@dataclass(frozen=True)
class HomeView:
    portfolios: Catalog
    selected_category: Optional[str] = None
    message: str = ''

    view_name = 'home'
    template = 'home.html'

    @property
    def has_matches(self) -> bool:
        """False when the selected category is unknown to the catalog"""
        if self.selected_category is None:
            return True
        return self.selected_category in self.portfolios

    def context(self):
        return {
            'message': self.message,
            'portfolios': self.portfolios,
            'selectedCategory': self.selected_category
        }


@dataclass(frozen=True)
class SupportView:
    visitor_count: VisitorCount
    message: str = ''

    view_name = 'support'
    template = 'support.html'

    def context(self):
        return {
            'message': self.message,
            'visitorCount': self.visitor_count
        }


@dataclass(frozen=True)
class PrivacyView:
    message: str = ''

    view_name = 'privacy'
    template = 'policy/privacy_policy.html'

    def context(self):
        return {'message': self.message}


@dataclass(frozen=True)
class PlainTextView:
    """Raw response body that bypasses templating"""
    body: str
    content_type: str = 'text/plain; charset=utf-8'
