#!/usr/bin/env python3
"""
Ledger Example: Paginated Queries and Transactions

This example demonstrates:
- Issuing and transferring tokens in one transaction
- Reading one page at a time and continuing from a page
- Iterating every result with each() and async for
- Summing tokens by account
- Callback-style completion

Requirements:
- SEQ_LEDGER_NAME and SEQ_CREDENTIAL environment variables
- Network access to the ledger API
"""

import asyncio
import logging
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from sequence_sdk import Client, SequenceConfig, QueryParams, IterationOutcome, STOP
from sequence_sdk.core.exceptions import APIError, ConfigurationError, SequenceSDKError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def example_transact(client: Client):
    """Issue tokens to one account and move some of them to another."""
    print("\n=== Transaction Example ===")

    def build(builder):
        builder.issue(
            flavor_id="usd",
            amount=100,
            destination_account_id="alice",
            token_tags={"source": "example"}
        )
        builder.transfer(
            flavor_id="usd",
            amount=25,
            source_account_id="alice",
            destination_account_id="bob",
            action_tags={"invoice": "inv-1"}
        )

    transaction = await client.transactions.transact(build)
    print(f"Committed transaction {transaction.id} with {len(transaction.actions)} actions")


async def example_pages(client: Client):
    """Walk a query page by page."""
    print("\n=== Page Example ===")

    query = client.transactions.list(
        QueryParams(filter="actions(flavorId=$1)", filter_params=["usd"], page_size=2)
    )

    page = await query.page()
    page_number = 1
    print(f"Page {page_number}: {[tx.id for tx in page.items]}")

    while page.has_next_page and page_number < 3:
        page = await page.next_page()
        page_number += 1
        print(f"Page {page_number}: {[tx.id for tx in page.items]}")


async def example_iteration(client: Client):
    """Iterate every result, stopping early after ten."""
    print("\n=== Iteration Example ===")

    seen = []

    def consumer(tx):
        seen.append(tx.id)
        if len(seen) >= 10:
            return STOP

    outcome = await client.transactions.list().each(consumer)
    if outcome is IterationOutcome.STOPPED:
        print(f"Stopped after {len(seen)} transactions")
    else:
        print(f"Read all {len(seen)} transactions")

    async for group in client.tokens.list(QueryParams(filter="accountId=$1", filter_params=["alice"])):
        print(f"alice holds {group.amount} {group.flavor_id}")


async def example_sums(client: Client):
    """Sum balances per account and flavor."""
    print("\n=== Token Sum Example ===")

    sums = await client.tokens.sum(QueryParams(group_by=["accountId", "flavorId"])).all()
    for row in sums:
        print(f"{row.account_id}: {row.amount} {row.flavor_id}")


async def example_callbacks(client: Client):
    """Use callbacks instead of awaiting results."""
    print("\n=== Callback Example ===")

    done = asyncio.Event()

    def on_page(error, page):
        if error:
            print(f"Page failed: {error}")
        else:
            print(f"Callback received {len(page.items)} transactions")
        done.set()

    client.transactions.list().page({"pageSize": 5}, callback=on_page)
    await done.wait()


async def main():
    """Run all examples."""
    print("Sequence SDK - Ledger Examples")
    print("=" * 50)

    try:
        config = SequenceConfig.from_env()
        async with Client(config) as client:
            await example_transact(client)
            await example_pages(client)
            await example_iteration(client)
            await example_sums(client)
            await example_callbacks(client)

        print("\n" + "=" * 50)
        print("All examples completed")

    except ConfigurationError as e:
        print(f"\nSet SEQ_LEDGER_NAME and SEQ_CREDENTIAL first: {e}")
    except APIError as e:
        print(f"\nLedger rejected the request ({e.seq_code}): {e}")
    except SequenceSDKError as e:
        print(f"\nExample failed with error: {e}")
        logger.exception("Example execution failed")


if __name__ == "__main__":
    asyncio.run(main())
