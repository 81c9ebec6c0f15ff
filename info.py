claim_package = '0xa4ad1545666eb4cd3d0d284711a2598f46afb5afc801c0209c805f701952e4be'
claim_pool = '0xa9b5a71109b9b498f240f9a81e584030de00ea745a8b651873da909890fa3549'
claim_admin_cap = '0x896ffb77a6c651cdaea5866a50d629fd6453587917b186a478a3d91c74792fab'

claim_module = 'claim'
claim_function = 'add_wait_claim_list'

coin_type = '0x2::sui::SUI'

# contract rejects more than 500 entries per call
max_batch_size = 500
max_pure_argument_size = 16 * 1024
max_gas_objects = 256

scans = {'mainnet': 'https://suiscan.xyz/mainnet/tx/',
         'testnet': 'https://suiscan.xyz/testnet/tx/',
         'devnet': 'https://suiscan.xyz/devnet/tx/'}

ed25519_flag = 0x00
# TransactionData intent: scope, version, app id
intent_prefix = bytes([0, 0, 0])
derivation_path = "m/44'/784'/0'/0'/0'"
private_key_prefix = 'suiprivkey'
