import pytest

from achainkit.dispatch import RpcResultRouter, route_event


def test_pinned_event_names():
    assert route_event("id_about") == "about"
    assert (
        route_event("id_wallet_transaction_history_splite_alice")
        == "wallet_transaction_history_splite_with_id"
    )


def test_testing_prefix_is_checked_before_plain_call():
    testing = route_event("id_call_contract_testing_42")
    assert testing == route_event("id_call_contract_testing")
    assert route_event("id_call_contract_7") == route_event("id_call_contract")
    assert testing != route_event("id_call_contract")


def test_transfer_to_contract_testing_shadowed_by_earlier_prefix():
    assert route_event("id_wallet_transfer_to_contract_testing") == route_event(
        "id_wallet_transfer_to_contract"
    )


def test_transaction_fee_shadowed_by_get_transaction():
    assert route_event("id_wallet_get_transaction_fee") == route_event(
        "id_wallet_get_transaction"
    )


def test_balance_ids_routed_separately():
    ids_event = route_event("id_wallet_account_balance_ids_bob")
    assert ids_event == route_event("id_wallet_account_balance_ids")
    assert route_event("id_wallet_account_balance_bob") == route_event(
        "id_wallet_account_balance"
    )
    assert ids_event != route_event("id_wallet_account_balance")


def test_console_prefixes_share_event():
    assert route_event(">>> info") == route_event("id_console_1")


def test_unknown_id_routes_nowhere():
    router = RpcResultRouter()
    assert route_event("nothing_here") is None
    assert router.dispatch("nothing_here", "data") is None


def test_plain_handler_receives_data():
    router = RpcResultRouter()
    received = []
    event = route_event("id_lock")
    router.connect(event, received.append)
    assert router.dispatch("id_lock_now", '"result":null') == event
    assert received == ['"result":null']


def test_with_id_handler_receives_id_and_data():
    router = RpcResultRouter()
    received = []
    request_id = "id_wallet_transfer_to_address_abc"
    router.connect(route_event(request_id), lambda rid, data: received.append((rid, data)))
    router.dispatch(request_id, "data")
    assert received == [(request_id, "data")]


def test_handlers_called_in_connection_order_and_only_for_their_event():
    router = RpcResultRouter()
    calls = []
    router.connect(route_event("id_about"), lambda data: calls.append(("first", data)))
    router.connect(route_event("id_about"), lambda data: calls.append(("second", data)))
    router.connect(route_event("id_lock"), lambda data: calls.append(("lock", data)))
    router.dispatch("id_about", "x")
    assert calls == [("first", "x"), ("second", "x")]


def test_connect_unknown_event_raises():
    router = RpcResultRouter()
    with pytest.raises(ValueError):
        router.connect("no_such_event", print)