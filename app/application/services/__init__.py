"""Application services: member search, page slicing, record normalization."""

from app.application.services.member_normalizer import (
    corporate_link_to_dict,
    normalize_member,
)
from app.application.services.member_search import MemberSearch, describe_filters
from app.application.services.pagination import slice_page

__all__ = [
    "MemberSearch",
    "corporate_link_to_dict",
    "describe_filters",
    "normalize_member",
    "slice_page",
]
