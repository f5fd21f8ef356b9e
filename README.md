# achainkit

Building blocks for a wallet that talks to an Achain-style blockchain node
over JSON-RPC. The package keeps the wallet's logic in plain Python objects:
it builds request text, routes replies by request id, parses asset lists and
transaction histories, stores settings and state, and checks user input.

## Modules

- `achainkit.rpc` – `to_json_format(request_id, method, params)` returns the
  JSON-RPC 2.0 request text, with every parameter sent as a string. Values
  are placed into the text as given, without escaping.
- `achainkit.models` – data classes `CurrencyInfo`, `Amount`, `LedgerEntry`,
  `TrxResult`, `CommonAccountInfo` and `TokenAccountInfo`, and the enums
  `TransactionType` and `ChainType`. `LedgerEntry.balance(account, asset)`
  and `CommonAccountInfo.balance(asset)` return a balance as text, `"0"`
  when unknown.
- `achainkit.parsing` – `parse_currency_list(json_str, common_asset)` reads an
  asset list (leaving out `ECT`, sorting by name, putting the common asset
  first with id 0); `parse_trx_results(trx_json, asset_name_for_id)` reads a
  transaction history into `TrxResult` records. Malformed input gives an
  empty result rather than an exception.
- `achainkit.dispatch` – `route_event(request_id)` names the event a reply
  belongs to by the prefix of its id (first match wins), or returns `None`.
  `RpcResultRouter.connect(event, handler)` registers a handler (unknown
  event names raise `ValueError`); `RpcResultRouter.dispatch(request_id,
  data)` calls the handlers and returns the event name. Handlers of the
  `*_with_id` events are called as `handler(request_id, data)`, all others
  as `handler(data)`.
- `achainkit.datastore` – `resolve_app_paths(environ, platform)` returns an
  `AppPaths` (`app_data_path`, `tool_config_path`, `config_path`,
  `log_path`) for `win32`, `darwin` or other platforms. `Settings` is a
  key/value store keyed as `/group/name`, written to an INI file when given
  a path and kept in memory otherwise; values are stored as JSON.
  `DataStore` holds currencies, accounts, token balances and the current
  account: `load_currencies`, `currency_by_id`, `currency_by_contract_id`,
  `account_address`, `account_by_address`, `delete_account`,
  `set_token_balance`, `token_balance`, `set_current_account` and
  `parse_transactions`. `token_transfer_params(to_address, amount, remark)`
  builds the parameter string of a token `transfer_to` call.
- `achainkit.accounts` – `check_new_password` raises `PasswordError` for
  empty, mismatched or shorter-than-eight passwords; `strip_spaces`;
  `parse_check_passphrase` and `parse_delete_result` read node replies;
  `export_key_path`, `extract_private_key` and `encode_private_key` prepare
  a `.gkey` key file's path and contents.
- `achainkit.checks` – `sanitize_remark` drops `=` and `;`;
  `validate_account_name` raises `AccountNameError` for names that are
  empty, longer than 63 characters, not of the form `[a-z][a-z0-9]+`, or
  already in use; `parse_sync_status` returns a `SyncStatus` from a node
  info reply; `active_marker_y(page_index)` gives a menu marker's position.
- `achainkit.animation` – `DynamicMove` moves a point to a destination in a
  fixed number of equal frames; `step()` advances one frame and
  `positions()` yields the rest, calling `on_end` once when done.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

```python
from achainkit.rpc import to_json_format
from achainkit.dispatch import RpcResultRouter

request = to_json_format("id_wallet_list_my_accounts", "wallet_list_my_accounts", [])

router = RpcResultRouter()
router.connect("wallet_list_my_accounts", lambda data: print("accounts:", data))
router.dispatch("id_wallet_list_my_accounts", '"result":[]')  # -> "wallet_list_my_accounts"
```

```python
from achainkit.datastore import DataStore, token_transfer_params

store = DataStore()
store.load_currencies(
    '{"result": [{"id": 1, "name": "TKN", "contractId": "CON1", "coinType": "TKN"}]}'
)
print([c.name for c in store.currencies])      # ['ACT', 'TKN']
print(token_transfer_params("addr", 1.5, "memo"))  # addr|1.50000|memo
```

```python
from achainkit.checks import parse_sync_status

status = parse_sync_status(
    '"blockchain_head_block_num":120,"blockchain_head_block_age":30,'
    '"blockchain_head_block_timestamp":"2020-01-01T00:00:00"'
)
print(status)  # SyncStatus(synced=True, blocks_behind=3, head_block_num=120)
```

## What the package does not do

It opens no network connections and starts no node: it builds request text
and reads reply text, but sending requests and receiving replies is left to
the caller. It does not fetch the asset list from a server, has no screens
or windows, and installs no command-line program.

## Tests

```
pytest
```