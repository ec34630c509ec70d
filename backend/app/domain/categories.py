"""Board categories and their access tiers.

Pure domain module, no DB access. Restricted-tier categories ("GOLD room")
need the AUTHOR_RESTRICTED capability to write into.
"""

from enum import StrEnum

from app.domain.roles import Capability, Role, has_capability


class CategoryTier(StrEnum):
    """Access tier of a board category."""

    OPEN = "open"
    RESTRICTED = "restricted"


SCAM_REPORT_CATEGORY = "강팔이피해사례"

BOARD_CATEGORIES: list[str] = [
    "Ai부업경험담",
    SCAM_REPORT_CATEGORY,
    "부업질문",
    "자유게시판",
]

RESTRICTED_CATEGORIES: list[str] = [
    "고수의노하우",
    "수익인증",
]

ALL_CATEGORIES: list[str] = BOARD_CATEGORIES + RESTRICTED_CATEGORIES


def category_tier(category: str) -> CategoryTier:
    """Return the access tier of a category. Unknown names are open."""
    if category in RESTRICTED_CATEGORIES:
        return CategoryTier.RESTRICTED
    return CategoryTier.OPEN


def can_author(role: Role, category: str) -> bool:
    """Return True if a member with ``role`` may write into ``category``."""
    if category_tier(category) == CategoryTier.RESTRICTED:
        return has_capability(role, Capability.AUTHOR_RESTRICTED)
    return True
