"""
Rich console rendering of composite records.
"""

import json
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from launchlens.models import CapabilityProfile, CompositeRecord, phase_name
from launchlens.utils import format_timestamp, format_token_amount, truncate_address

console = Console()


def render_json(records: List[CompositeRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2)


def _price(wei: int) -> str:
    return f"{format_token_amount(wei):,.4f}"


def _sale_table(record: CompositeRecord) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right", style="yellow")

    if record.profile == CapabilityProfile.AUCTION_STYLE:
        sale = record.auction_sale
        rows = [
            ("Phase", phase_name(sale.current_phase)),
            ("Auction / Allowlist / Devs", f"{sale.amount_for_auction} / {sale.amount_for_allowlist} / {sale.amount_for_devs}"),
            ("Auction start", format_timestamp(sale.auction_sale_start_time)),
            ("Allowlist start", format_timestamp(sale.allowlist_start_time)),
            ("Public sale start", format_timestamp(sale.public_sale_start_time)),
            ("Start → end price", f"{_price(sale.auction_start_price)} → {_price(sale.auction_end_price)}"),
            ("Drop", f"{_price(sale.auction_drop_per_step)} every {sale.auction_drop_interval}s over {sale.auction_sale_duration}s"),
            ("Discounts (allowlist / public)", f"{sale.allowlist_discount_percent / 100:.2f}% / {sale.public_sale_discount_percent / 100:.2f}%"),
            ("Auction price", _price(sale.auction_price)),
            ("Allowlist price", _price(sale.allowlist_price)),
            ("Public sale price", _price(sale.public_sale_price)),
            ("Last auction price", _price(sale.last_auction_price)),
            ("Minted (auction / allowlist / public)", f"{sale.amount_minted_during_auction} / {sale.amount_minted_during_allowlist} / {sale.amount_minted_during_public_sale}"),
        ]
    else:
        sale = record.flat_sale
        rows = [
            ("Phase", phase_name(sale.current_phase)),
            ("Allowlist / Devs", f"{sale.amount_for_allowlist} / {sale.amount_for_devs}"),
            ("Allowlist start", format_timestamp(sale.allowlist_start_time)),
            ("Public sale start", format_timestamp(sale.public_sale_start_time)),
            ("Allowlist price", _price(sale.allowlist_price)),
            ("Sale price", _price(sale.sale_price)),
            ("Minted (allowlist / public)", f"{sale.amount_minted_during_allowlist} / {sale.amount_minted_during_public_sale}"),
        ]

    for label, value in rows:
        table.add_row(label, value)
    return table


def display_record(record: CompositeRecord) -> None:
    """
    Print one composite record.

    Args:
        record: Aggregated launch record
    """
    collection = record.collection
    reveal = record.reveal

    console.print(
        Panel(
            f"[bold]{collection.name}[/bold] ({collection.symbol})\n"
            f"{record.address}\n"
            f"Supply {collection.total_supply:,} / {collection.collection_size:,}, "
            f"max batch {collection.max_batch_size}\n"
            f"Revealed through #{reveal.last_token_revealed}, "
            f"{reveal.reveal_batch_size} per step every {reveal.reveal_interval}s "
            f"from {format_timestamp(reveal.reveal_start_time)}",
            title=record.profile.name,
            border_style="cyan",
        )
    )
    console.print(_sale_table(record))

    participation = record.participation
    if participation.requester:
        console.print(
            f"[bold]{truncate_address(participation.requester)}:[/bold] "
            f"holds {participation.balance}, minted {participation.number_minted}, "
            f"allowlist allowance {participation.allowlist_allowance}"
        )


def display_records(records: List[CompositeRecord], offset: int = 0) -> None:
    """
    Print a page of composite records as one summary table.

    Args:
        records: Aggregated launch records in registry order
        offset: Registry index of the first record
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Address", style="cyan")
    table.add_column("Name", width=24)
    table.add_column("Profile", style="blue")
    table.add_column("Phase")
    table.add_column("Supply", justify="right", style="yellow")
    table.add_column("Price", justify="right", style="green")

    for record in records:
        if record.profile == CapabilityProfile.AUCTION_STYLE:
            price = record.auction_sale.public_sale_price
        else:
            price = record.flat_sale.sale_price
        table.add_row(
            truncate_address(record.address),
            record.collection.name,
            record.profile.name,
            phase_name(record.current_phase),
            f"{record.collection.total_supply:,}/{record.collection.collection_size:,}",
            _price(price),
        )

    console.print(table)
    console.print(f"Registry indices {offset}-{offset + len(records) - 1}")
