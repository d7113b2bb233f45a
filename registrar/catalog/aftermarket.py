"""dynadot_aftermarket — auctions, backorders, closeouts and marketplace listings."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx
from registrar.constants import DYNADOT_URLS

_AUCTION = {"auctionId": "auction_id"}
_CURRENCY_ONLY = f.shape(currency=f.CURRENCY.optional())

aftermarket_tool = CompositeTool(
    name="dynadot_aftermarket",
    description=(
        "Aftermarket: auctions, backorders, expired domains, marketplace listings. "
        f"Browse domains: {DYNADOT_URLS['home']}"
    ),
    actions={
        # ── Backorders ──
        "backorder_add": ActionDefinition(
            command="add_backorder_request",
            description="Add domain to backorder list",
            params=f.shape(domain=f.DOMAIN),
        ),
        "backorder_delete": ActionDefinition(
            command="delete_backorder_request",
            description="Remove from backorder list",
            params=f.shape(domain=f.DOMAIN),
        ),
        "backorder_list": ActionDefinition(
            command="backorder_request_list",
            description="List backorder requests",
        ),
        # ── Auctions ──
        "auction_list_open": ActionDefinition(
            command="get_open_auctions",
            description="List open auctions",
            params=_CURRENCY_ONLY,
        ),
        "auction_details": ActionDefinition(
            command="get_auction_details",
            description="Get auction details",
            params=f.shape(auctionId=f.AUCTION_ID),
            transform=tx.rename(_AUCTION),
        ),
        "auction_bids": ActionDefinition(
            command="get_auction_bids",
            description="Get auction bids",
            params=f.shape(auctionId=f.AUCTION_ID),
            transform=tx.rename(_AUCTION),
        ),
        "auction_bid": ActionDefinition(
            command="place_auction_bid",
            description="Place auction bid",
            params=f.shape(auctionId=f.AUCTION_ID, bidAmount=f.AMOUNT, currency=f.CURRENCY.optional()),
            transform=tx.rename(
                {**_AUCTION, "bidAmount": "bid_amount", "currency": "currency"},
                defaults={"currency": "USD"},
            ),
        ),
        "auction_list_closed": ActionDefinition(
            command="get_closed_auctions",
            description="List closed auctions",
        ),
        # ── Backorder auctions ──
        "backorder_auction_list_open": ActionDefinition(
            command="get_open_backorder_auctions",
            description="List open backorder auctions",
            params=_CURRENCY_ONLY,
        ),
        "backorder_auction_details": ActionDefinition(
            command="get_backorder_auction_details",
            description="Get backorder auction details",
            params=f.shape(auctionId=f.AUCTION_ID),
            transform=tx.rename(_AUCTION),
        ),
        "backorder_auction_bid": ActionDefinition(
            command="place_backorder_auction_bid",
            description="Place backorder auction bid",
            params=f.shape(auctionId=f.AUCTION_ID, bidAmount=f.AMOUNT),
            transform=tx.rename({**_AUCTION, "bidAmount": "bid_amount"}),
        ),
        "backorder_auction_list_closed": ActionDefinition(
            command="get_closed_backorder_auctions",
            description="List closed backorder auctions",
        ),
        # ── Expired closeouts ──
        "expired_list": ActionDefinition(
            command="get_expired_closeout_domains",
            description="List expired closeout domains",
            params=_CURRENCY_ONLY,
        ),
        "expired_buy": ActionDefinition(
            command="buy_expired_closeout_domain",
            description="Buy expired closeout domain",
            params=f.shape(domain=f.DOMAIN, currency=f.CURRENCY.optional()),
        ),
        # ── Marketplace ──
        "listings": ActionDefinition(
            command="get_listings",
            description="Get marketplace listings",
            params=_CURRENCY_ONLY,
        ),
        "listing_details": ActionDefinition(
            command="get_listing_item",
            description="Get listing details",
            params=f.shape(domain=f.DOMAIN),
        ),
        "buy_now": ActionDefinition(
            command="buy_it_now",
            description="Buy domain from marketplace",
            params=f.shape(domain=f.DOMAIN, currency=f.CURRENCY.optional()),
        ),
        "set_for_sale": ActionDefinition(
            command="set_for_sale",
            description="List domain for sale",
            params=f.shape(domain=f.DOMAIN, price=f.AMOUNT, currency=f.CURRENCY.optional()),
        ),
        "remove_from_sale": ActionDefinition(
            command="remove_domain_sale_setting",
            description="Remove domain from marketplace/auction (delist from sale)",
            params=f.shape(domain=f.DOMAIN),
        ),
        "afternic_confirm": ActionDefinition(
            command="set_afternic_confirm_action",
            description="Confirm/decline Afternic action",
            params=f.shape(domain=f.DOMAIN, confirmAction=f.CONFIRM_ACTION),
            transform=tx.rename({"domain": "domain", "confirmAction": "action"}),
        ),
        "sedo_confirm": ActionDefinition(
            command="set_sedo_confirm_action",
            description="Confirm/decline Sedo action",
            params=f.shape(domain=f.DOMAIN, confirmAction=f.CONFIRM_ACTION),
            transform=tx.rename({"domain": "domain", "confirmAction": "action"}),
        ),
    },
)
