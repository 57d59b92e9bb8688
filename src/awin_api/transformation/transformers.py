"""
Data Transformers

Pure functions turning API records into polars DataFrames.
"""

import polars as pl
from typing import Any, Dict, List, Optional
from ..extract.schemas import CommissionGroup, Transaction, TransactionPart
from .schemas import COMMISSION_GROUPS_SCHEMA, TRANSACTION_PARTS_SCHEMA
import logging

logger = logging.getLogger(__name__)


def _part_row(transaction: Transaction, part: Optional[TransactionPart]) -> Dict[str, Any]:
    sale = transaction.saleAmount
    commission = transaction.commissionAmount
    group = part.commissionGroup if part else None

    # Resolved group details win over the codes embedded in the part
    group_code = part.commissionGroupCode if part else None
    group_name = part.commissionGroupName if part else None
    if group:
        group_code = group.groupCode or group_code
        group_name = group.groupName or group_name

    return {
        "transaction_id": transaction.id,
        "advertiser_id": transaction.advertiserId,
        "publisher_id": transaction.publisherId,
        "commission_status": transaction.commissionStatus,
        "transaction_date": transaction.transactionDate,
        "validation_date": transaction.validationDate,
        "sale_amount": sale.amount if sale else None,
        "commission_amount": commission.amount if commission else None,
        "currency": (sale.currency if sale else None)
        or (commission.currency if commission else None),
        "order_ref": transaction.orderRef,
        "part_commission_group_id": part.commissionGroupId if part else None,
        "part_amount": part.amount if part else None,
        "part_commission_amount": part.commissionAmount if part else None,
        "commission_group_code": group_code,
        "commission_group_name": group_name,
        "commission_group_type": group.type if group else None,
        "commission_group_percentage": group.percentage if group else None,
    }


def transactions_to_dataframe(transactions: List[Transaction]) -> pl.DataFrame:
    """
    Flatten transactions to one row per transaction part

    Args:
        transactions: Parsed transactions (optionally enriched)

    Returns:
        pl.DataFrame: Rows with TRANSACTION_PARTS_SCHEMA
    """
    records = []
    for transaction in transactions:
        if not transaction.transactionParts:
            records.append(_part_row(transaction, None))
            continue
        for part in transaction.transactionParts:
            records.append(_part_row(transaction, part))

    logger.info(
        f"Flattened {len(transactions)} transactions into {len(records)} rows"
    )
    return pl.DataFrame(records, schema=TRANSACTION_PARTS_SCHEMA)


def commission_groups_to_dataframe(groups: List[CommissionGroup]) -> pl.DataFrame:
    """Convert commission groups to a DataFrame with COMMISSION_GROUPS_SCHEMA"""
    records = [
        {
            "group_id": group.groupId,
            "advertiser_id": group.advertiserId,
            "group_code": group.groupCode,
            "group_name": group.groupName,
            "type": group.type,
            "percentage": group.percentage,
            "amount": group.amount,
            "currency": group.currency,
        }
        for group in groups
    ]
    return pl.DataFrame(records, schema=COMMISSION_GROUPS_SCHEMA)
