"""Core constants: cache keys, search vocabulary and shared literal values.

Single source of truth for the in-process cache slots and the member
search vocabulary (sort keys, filter display text).
"""

# Constant keys for the single-value memo caches
CACHE_KEY_CROSS_ORGANIZATION_MEMBERS = "people:cross-organization-members"
CACHE_KEY_CORPORATE_LINKS = "people:corporate-links"

# Member search sort keys
SORT_ALPHABET = "Alphabet"
SORT_REVERSE_ALPHABET = "ReverseAlphabet"
SORT_ORGANIZATIONS = "Organizations"
DEFAULT_SORT = SORT_ALPHABET

# Catch-all message for unmatched people sub-routes
PEOPLE_ROUTE_NOT_FOUND_MESSAGE = (
    "no API or function available within this cross-organization people list"
)

# GitHub REST API
GITHUB_MEMBERS_PER_PAGE = 100
GITHUB_API_VERSION = "2022-11-28"
