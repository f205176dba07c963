"""DTO aliasing and optional-field tests."""

from __future__ import annotations

from exolix_sdk.base.dto import (
    CreateTransactionBody,
    CurrencyItem,
    CurrencyNetwork,
    ListCurrenciesParams,
    ListTransactionsParams,
    Paginated,
    RateParams,
    Transaction,
)


def test_params_accept_snake_and_camel_case():
    camel = RateParams.model_validate({"coinFrom": "BTC", "withdrawalAmount": "2"})
    snake = RateParams(coin_from="BTC", withdrawal_amount="2")
    assert camel == snake  # nosec B101
    assert camel.to_api() == {"coinFrom": "BTC", "withdrawalAmount": "2"}  # nosec B101


def test_to_api_drops_unset_fields_in_declaration_order():
    params = ListTransactionsParams(date_to="2024-02-01", page=3, statuses="success")
    assert list(params.to_api()) == ["page", "dateTo", "statuses"]  # nosec B101
    assert ListCurrenciesParams().to_api() == {}  # nosec B101


def test_network_address_pattern_prefers_documented_spelling():
    both = CurrencyNetwork.model_validate(
        {"network": "TRX", "name": "Tron", "addressRegex": "^T.+$", "addresRegex": "^legacy$"}
    )
    assert both.address_pattern == "^T.+$"  # nosec B101
    legacy = CurrencyNetwork.model_validate({"network": "TRX", "name": "Tron", "addresRegex": "^legacy$"})
    assert legacy.address_pattern == "^legacy$"  # nosec B101
    neither = CurrencyNetwork(network="TRX", name="Tron")
    assert neither.address_pattern is None  # nosec B101


def test_network_precision_accepts_number_or_boolean():
    assert CurrencyNetwork(network="A", name="A", precision=8).precision == 8  # nosec B101
    assert CurrencyNetwork(network="A", name="A", precision=False).precision is False  # nosec B101


def test_currency_networks_present_only_when_requested():
    plain = CurrencyItem.model_validate({"code": "BTC", "name": "Bitcoin", "icon": "", "notes": ""})
    assert plain.networks is None  # nosec B101


def test_unknown_response_fields_are_kept():
    page = Paginated[CurrencyItem].model_validate(
        {"data": [{"code": "BTC", "name": "Bitcoin", "rank": 1}], "count": 1, "next": None}
    )
    assert page.data[0].model_extra == {"rank": 1}  # nosec B101
    assert page.count == 1  # nosec B101


def test_create_body_serializes_with_api_names():
    body = CreateTransactionBody(coin_from="BTC", network_from="BTC", withdrawal_extra_id="memo", slippage=0.5)
    assert body.to_api() == {  # nosec B101
        "coinFrom": "BTC",
        "networkFrom": "BTC",
        "withdrawalExtraId": "memo",
        "slippage": 0.5,
    }


def test_transaction_accepts_unlisted_status_and_rate_type():
    coin = {"coinCode": "BTC", "coinName": "Bitcoin", "network": "BTC", "networkName": "Bitcoin"}
    tx = Transaction.model_validate(
        {
            "id": "t1",
            "amount": 1,
            "amountTo": 2,
            "coinFrom": coin,
            "coinTo": coin,
            "createdAt": "2024-05-01T10:00:00.000Z",
            "depositAddress": "d",
            "withdrawalAddress": "w",
            "hashIn": {},
            "hashOut": {},
            "rate": 2,
            "rateType": "dynamic",
            "status": "hold",
            "source": "widget",
        }
    )
    assert (tx.status, tx.rate_type, tx.source) == ("hold", "dynamic", "widget")  # nosec B101
