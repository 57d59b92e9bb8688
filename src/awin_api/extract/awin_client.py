"""
Awin API Client

Publisher API client for transactions and commission groups.
Every request passes through a fixed-window throttle
(see http://wiki.awin.com/index.php/Publisher_API#Limitation.2FThrottling).
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from ..config import ClientConfig
from ..coreutils.request import new_session, get_json
from ..coreutils.throttle import DEFAULT_CALLS_LIMIT, RateThrottle
from ..coreutils.time import format_api_datetime
from .commission_groups import CommissionGroupCache
from .schemas import (
    CommissionGroup,
    Transaction,
    parse_commission_groups,
    parse_transactions,
)

logger = logging.getLogger(__name__)

# API Endpoints
AWIN_ENDPOINT = "https://api.awin.com"
TRANSACTIONS_RESOURCE = "/publishers/{publisher_id}/transactions/"
COMMISSION_GROUPS_RESOURCE = "/publishers/{publisher_id}/commissiongroups/"

DEFAULT_TIMEZONE = "Europe/Paris"
DEFAULT_TIMEOUT = 10


class AwinClient:
    """Client for the Awin publisher API"""

    def __init__(
        self,
        auth_token: str,
        publisher_id: int,
        timeout: float = DEFAULT_TIMEOUT,
        api_calls_limit: Optional[int] = DEFAULT_CALLS_LIMIT,
        verbose_commission_groups: bool = False,
        endpoint: str = AWIN_ENDPOINT,
        session: Optional[requests.Session] = None,
        throttle: Optional[RateThrottle] = None,
    ):
        """
        Initialize the Awin client

        Args:
            auth_token: Awin API bearer token
            publisher_id: Awin publisher id
            timeout: Request timeout in seconds
            api_calls_limit: Calls allowed per minute (0 or None disables throttling)
            verbose_commission_groups: Resolve a CommissionGroup for every transaction part
            endpoint: API base URL
            session: Optional pre-built HTTP session
            throttle: Optional pre-built throttle (overrides api_calls_limit)
        """
        self.publisher_id = publisher_id
        self.timeout = timeout
        self.verbose_commission_groups = verbose_commission_groups
        self.endpoint = endpoint.rstrip("/")
        self.session = session or new_session(auth_token)
        self.throttle = throttle or RateThrottle(limit=api_calls_limit)
        self.commission_groups = CommissionGroupCache(self.get_commission_groups)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "AwinClient":
        """Create a client from a ClientConfig"""
        return cls(
            auth_token=config.auth_token,
            publisher_id=config.publisher_id,
            timeout=config.timeout,
            api_calls_limit=config.api_calls_limit,
            verbose_commission_groups=config.verbose_commission_groups,
            endpoint=config.endpoint,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "AwinClient":
        """Create a client from AWIN_* environment variables"""
        return cls.from_config(ClientConfig.from_env(), **kwargs)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AwinClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_transactions(
        self,
        start_date: datetime,
        end_date: datetime,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> List[Transaction]:
        """
        Fetch all transactions from start_date until end_date

        Args:
            start_date: Start of the range
            end_date: End of the range
            timezone: Awin timezone name, see http://wiki.awin.com/index.php/API_get_transactions_list

        Returns:
            List[Transaction]: Transactions in response order
        """
        params = {
            "startDate": format_api_datetime(start_date),
            "endDate": format_api_datetime(end_date),
            "timezone": timezone,
        }

        resource = TRANSACTIONS_RESOURCE.format(publisher_id=self.publisher_id)
        body = self._make_request(resource, params)
        transactions = parse_transactions(body)

        logger.info(
            f"Fetched {len(transactions)} transactions "
            f"from {params['startDate']} to {params['endDate']} ({timezone})"
        )

        if self.verbose_commission_groups:
            for transaction in transactions:
                for part in transaction.transactionParts:
                    part.commissionGroup = self.commission_groups.resolve(
                        part.commissionGroupId, transaction.advertiserId
                    )

        return transactions

    def get_commission_groups(self, advertiser_id: int) -> List[CommissionGroup]:
        """
        Fetch the commission groups of an advertiser

        Args:
            advertiser_id: Advertiser id

        Returns:
            List[CommissionGroup]: Groups annotated with the advertiser id
        """
        params = {"advertiserId": advertiser_id}

        resource = COMMISSION_GROUPS_RESOURCE.format(publisher_id=self.publisher_id)
        body = self._make_request(resource, params)
        commission_groups = parse_commission_groups(body)

        logger.info(
            f"Fetched {len(commission_groups)} commission groups "
            f"for advertiser {advertiser_id}"
        )
        return commission_groups

    def _make_request(self, resource: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.throttle.acquire()

        url = self.endpoint + resource
        return get_json(self.session, url, params=params, timeout=self.timeout)
