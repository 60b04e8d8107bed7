# ============================================================================
# COLLECTION RECONCILIATION PIPELINE
# ============================================================================
# STATUS: Service - pure client-side collection pipeline
# PURPOSE: Deduplicate, search-filter and paginate ProcessedAsset collections
# EXPORTS: PageResult, deduplicate, filter_assets, paginate, reconcile,
#          total_pages_for, DEFAULT_PAGE_SIZE
# DEPENDENCIES: services.record_normalizer
# ============================================================================
"""
Collection Reconciliation Pipeline.

Three pure stages, applied in order:

    1. deduplicate: composite key (id, name), first occurrence wins
    2. filter_assets: case-insensitive substring over the string form of
       every present field value; an empty query matches everything
    3. paginate: rows [(page-1)*size, page*size),
       total_pages = max(1, ceil(n / size))

Deterministic: the same input always yields the same page.
"""

import math
from dataclasses import dataclass
from typing import Hashable, Iterable, List, Sequence, Set, Tuple

from core.models import ProcessedAsset
from .record_normalizer import format_value

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageResult:
    rows: Tuple[ProcessedAsset, ...]
    page: int
    total_pages: int
    total_count: int
    has_previous: bool
    has_next: bool


def _dedup_key(asset: ProcessedAsset) -> Tuple[Hashable, Hashable]:
    key = (asset.id, asset.name)
    try:
        hash(key)
    except TypeError:
        return (repr(asset.id), repr(asset.name))
    return key


def deduplicate(assets: Iterable[ProcessedAsset]) -> List[ProcessedAsset]:
    """Keep the first asset for each (id, name) key, preserving order."""
    seen: Set[Tuple[Hashable, Hashable]] = set()
    unique = []
    for asset in assets:
        key = _dedup_key(asset)
        if key in seen:
            continue
        seen.add(key)
        unique.append(asset)
    return unique


def matches(asset: ProcessedAsset, query: str) -> bool:
    """
    True if any non-None field value contains query (case-insensitive).

    Missing values are skipped, not stringified: searching "null" or "none"
    never matches a record just because one of its fields is empty.
    """
    if not query:
        return True
    needle = query.lower()
    return any(
        needle in format_value(value).lower()
        for value in asset.as_dict().values()
        if value is not None
    )


def filter_assets(assets: Iterable[ProcessedAsset], query: str = "") -> List[ProcessedAsset]:
    return [asset for asset in assets if matches(asset, query)]


def total_pages_for(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(count / page_size))


def paginate(
    assets: Sequence[ProcessedAsset],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE
) -> PageResult:
    """
    Slice one page.

    Raises:
        ValueError: page < 1 or page_size < 1

    A page past the end yields no rows (has_next is False).
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    total_pages = total_pages_for(len(assets), page_size)
    start = (page - 1) * page_size
    rows = tuple(assets[start:start + page_size])
    return PageResult(
        rows=rows,
        page=page,
        total_pages=total_pages,
        total_count=len(assets),
        has_previous=page > 1,
        has_next=page < total_pages,
    )


def reconcile(
    assets: Iterable[ProcessedAsset],
    search: str = "",
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE
) -> PageResult:
    """Deduplicate, filter, then paginate."""
    return paginate(filter_assets(deduplicate(assets), search), page, page_size)
