"""Routing of node replies to handlers by the prefix of their request id."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

# Checked in order; the first matching prefix wins.
_ROUTES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("id_call_contract_testing",), "call_contract_testing"),
    (("id_call_contract",), "call_contract"),
    (("id_wallet_transfer_to_contract",), "wallet_transfer_to_contract"),
    (("id_wallet_transfer_to_contract_testing",), "wallet_transfer_to_contract_testing"),
    (("id_get_contract_info",), "get_contract_info"),
    (("id_about",), "about"),
    (("id_get_info",), "get_info"),
    (("id_validate_address",), "validate_address"),
    (("id_rpc_set_username",), "rpc_set_user_name"),
    (("id_rpc_set_password",), "rpc_set_password"),
    (("id_rpc_start_server",), "rpc_start_server"),
    (("id_ntp_update_time",), "ntp_update_time"),
    (("id_disk_usage",), "disk_usage"),
    (("id_network_add_node",), "network_add_node"),
    (("id_network_get_info",), "network_get_info"),
    (("id_network_get_connection_count",), "network_get_connection_count"),
    (("id_network_get_peer_info",), "network_get_peer_info"),
    (("id_network_list_potential_peers",), "network_list_potential_peers"),
    (("id_network_get_upnp_info",), "network_get_upnp_info"),
    (("id_execute_script",), "execute_script"),
    (("id_delegate_get_config",), "delegate_get_config"),
    (
        ("id_delegate_set_network_min_connection_count",),
        "delegate_set_network_min_connection_count",
    ),
    (
        ("id_delegate_set_block_max_transaction_count",),
        "delegate_set_block_max_transaction_count",
    ),
    (("id_delegate_set_block_max_size",), "delegate_set_block_max_size"),
    (("id_delegate_set_transaction_max_size",), "delegate_set_transaction_max_size"),
    (("id_delegate_set_transaction_min_fee",), "delegate_set_transaction_min_fee"),
    (("id_blockchain_get_block_transactions",), "blockchain_get_block_transactions"),
    (("id_blockchain_get_account",), "blockchain_get_account"),
    (("id_blockchain_get_info",), "blockchain_get_info"),
    (("id_blockchain_generate_snapshot",), "blockchain_generate_snapshot"),
    (("id_blockchain_is_synced",), "blockchain_is_synced"),
    (("id_blockchain_get_block_count",), "blockchain_get_block_count"),
    (("id_blockchain_list_key_balances",), "blockchain_list_key_balances"),
    (("id_blockchain_list_active_delegates",), "blockchain_list_active_delegates"),
    (("id_blockchain_list_accounts",), "blockchain_list_accounts"),
    (
        ("id_blockchain_list_pending_transactions",),
        "blockchain_list_pending_transactions",
    ),
    (("id_blockchain_get_transaction",), "blockchain_get_transaction"),
    (("id_blockchain_list_delegates",), "blockchain_list_delegates"),
    (("id_blockchain_list_blocks",), "blockchain_list_blocks"),
    (("id_blockchain_get_block_signee",), "blockchain_get_block_signee"),
    (("id_blockchain_get_block",), "blockchain_get_block"),
    (("id_wallet_create",), "wallet_create"),
    (("id_wallet_get_info",), "wallet_get_info"),
    (("id_wallet_close",), "wallet_close"),
    (("id_wallet_open",), "wallet_open"),
    (("id_wallet_unlock",), "wallet_unlock"),
    (("id_wallet_import_private_key",), "wallet_import_private_key"),
    (("register_id_wallet_import_private_key",), "wallet_import_register_private_key"),
    (("id_wallet_backup_create",), "wallet_backup_create"),
    (("id_wallet_backup_restore",), "wallet_backup_restore"),
    (("id_wallet_set_automatic_backups",), "wallet_set_automatic_backups"),
    (
        ("id_wallet_set_transaction_expiration_time",),
        "wallet_set_transaction_expiration_time",
    ),
    (("id_wallet_account_transaction_historys",), "wallet_account_transaction_history"),
    (
        ("id_wallet_transaction_history_splite_",),
        "wallet_transaction_history_splite_with_id",
    ),
    (("id_wallet_transaction_history_splite",), "wallet_transaction_history_splite"),
    (
        ("id_wallet_get_pending_transaction_errors",),
        "wallet_get_pending_transaction_errors",
    ),
    (("id_wallet_change_passphrase",), "wallet_change_passphrase"),
    (("id_wallet_check_passphrase",), "wallet_check_passphrase"),
    (("id_wallet_check_address",), "wallet_check_address"),
    (("id_wallet_account_create",), "wallet_account_create"),
    (("id_wallet_account_set_approval",), "wallet_account_set_approval"),
    (("id_wallet_transfer_to_address_",), "wallet_transfer_to_address_with_id"),
    (("id_wallet_transfer_to_address",), "wallet_transfer_to_address"),
    (
        ("id_wallet_transfer_to_public_account_",),
        "wallet_transfer_to_public_account_with_id",
    ),
    (("id_wallet_transfer_to_public_account",), "wallet_transfer_to_public_account"),
    (("id_wallet_rescan_blockchain",), "wallet_rescan_blockchain"),
    (("id_wallet_cancel_scan",), "wallet_cancel_scan"),
    (("id_wallet_get_transaction",), "wallet_get_transaction"),
    (("id_wallet_account_register",), "wallet_account_register"),
    (("id_wallet_list_accounts",), "wallet_list_accounts"),
    (("id_wallet_list_unregistered_accounts",), "wallet_list_unregistered_accounts"),
    (("id_wallet_list_my_addresses",), "wallet_list_my_addresses"),
    (("id_wallet_list_my_accounts",), "wallet_list_my_accounts"),
    (("id_wallet_get_account_public_address",), "wallet_get_account_public_address"),
    (("id_wallet_account_rename",), "wallet_account_rename"),
    (("id_wallet_account_balance_ids",), "wallet_account_balance_ids"),
    (("id_wallet_account_balance",), "wallet_account_balance"),
    (("id_wallet_delegate_withdraw_pay",), "wallet_delegate_withdraw_pay"),
    (("id_wallet_delegate_pay_balance_query",), "wallet_delegate_pay_balance_query"),
    (("id_wallet_get_delegate_statue",), "wallet_get_delegate_status"),
    (("id_wallet_account_delete",), "wallet_account_delete"),
    (("id_wallet_set_transaction_fee",), "wallet_set_transaction_fee"),
    (("id_wallet_get_transaction_fee",), "wallet_get_transaction_fee"),
    (("id_wallet_set_transaction_scanning",), "wallet_set_transaction_scanning"),
    (("id_wallet_dump_private_key",), "wallet_dump_private_key"),
    (
        ("id_wallet_delegate_set_block_production",),
        "wallet_delegate_set_block_production",
    ),
    (("id_wallet_dump_account_private_key",), "wallet_dump_account_private_key"),
    (
        ("id_wallet_account_update_registration",),
        "wallet_account_update_registration",
    ),
    (("id_console_", ">>>"), "execute_console_command"),
    (("id_balance",), "balance"),
    (("id_lock",), "lock"),
)

# Events whose handlers receive the request id as well as the data.
_WITH_ID_EVENTS = frozenset(
    {
        "wallet_transaction_history_splite_with_id",
        "wallet_transfer_to_address_with_id",
        "wallet_transfer_to_public_account_with_id",
    }
)

_EVENTS = frozenset(event for _, event in _ROUTES)


def route_event(request_id: str) -> str | None:
    """Name of the event a reply with ``request_id`` belongs to, or None."""
    for prefixes, event in _ROUTES:
        if request_id.startswith(prefixes):
            return event
    return None


class RpcResultRouter:
    """Calls the handlers connected to the event that a reply's id selects.

    Handlers of the ``*_with_id`` events are called as ``handler(request_id, data)``,
    all others as ``handler(data)``.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Callable[..., Any]]] = defaultdict(list)

    def connect(self, event: str, handler: Callable[..., Any]) -> None:
        """Register ``handler`` for ``event``; unknown events raise ValueError."""
        if event not in _EVENTS:
            raise ValueError(f"unknown event: {event!r}")
        self._handlers[event].append(handler)

    def dispatch(self, request_id: str, data: str) -> str | None:
        """Deliver ``data`` to the handlers of its event and return the event name."""
        event = route_event(request_id)
        if event is None:
            return None
        for handler in list(self._handlers.get(event, ())):
            if event in _WITH_ID_EVENTS:
                handler(request_id, data)
            else:
                handler(data)
        return event