"""Builders for raw ledger API responses used across the unit tests."""


def page_data(items, cursor="", last_page=False, next=None):
    """Raw API response for one page."""
    data = {"items": items, "cursor": cursor, "lastPage": last_page}
    if next is not None:
        data["next"] = next
    return data


def tx(tx_id):
    """Raw transaction as returned by the ledger."""
    return {"id": tx_id, "timestamp": "2026-01-01T00:00:00Z", "sequenceNumber": 1, "actions": []}
