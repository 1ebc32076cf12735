"""
traitdex utilities — Cross-cutting helpers shared by commands.
"""

from .pagination import Paginator, add_pagination_args, paginate_from_args, DEFAULT_LIMIT

__all__ = ['Paginator', 'add_pagination_args', 'paginate_from_args', 'DEFAULT_LIMIT']
