"""
Commission Group Cache

Lazy lookup table of commission groups keyed by group id. A miss fetches
every group of the advertiser in one call, so sibling transaction parts of
the same advertiser resolve from memory afterwards.
"""

import logging
from typing import Callable, Dict, List, Optional

from .schemas import CommissionGroup

logger = logging.getLogger(__name__)


class CommissionGroupCache:
    """Process-lifetime cache; entries are never evicted or overwritten"""

    def __init__(self, fetch: Callable[[int], List[CommissionGroup]]):
        self._fetch = fetch
        self._groups: Dict[str, CommissionGroup] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, commission_group_id) -> bool:
        return str(commission_group_id) in self._groups

    def get(self, commission_group_id) -> Optional[CommissionGroup]:
        return self._groups.get(str(commission_group_id))

    def resolve(
        self, commission_group_id: Optional[str], advertiser_id: int
    ) -> Optional[CommissionGroup]:
        """
        Find a commission group, fetching the advertiser's groups on a miss

        Args:
            commission_group_id: Group id from a transaction part (may be empty)
            advertiser_id: Advertiser whose groups are fetched on a miss

        Returns:
            CommissionGroup, or None if the id is empty, unknown, or the fetch failed
        """
        if not commission_group_id:
            return None

        key = str(commission_group_id)
        if key in self._groups:
            return self._groups[key]

        try:
            groups = self._fetch(advertiser_id)
        except Exception as e:
            logger.warning(
                f"Could not fetch commission groups for advertiser {advertiser_id}: {e}"
            )
            return None

        for group in groups:
            self._groups.setdefault(group.id, group)

        logger.debug(
            f"Cached {len(groups)} commission groups for advertiser {advertiser_id}"
        )
        return self._groups.get(key)
