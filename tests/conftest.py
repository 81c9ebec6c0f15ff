"""Shared fixtures for the claim-list tests. The node is always mocked."""

import pytest
from bip_utils import Base58Encoder

import info


SAMPLE_ADDRESS = '0x2248c3a8a8fb6fd0810f984016fa4d6542e1cceaf8484a6bdf97a291a8fb2028'
TEST_SEED_HEX = '0x' + '07' * 32
OBJECT_DIGEST = Base58Encoder.Encode(bytes(range(32)))


def make_claims(count, address=SAMPLE_ADDRESS, amount=1000000):
    return [{'address': address, 'amount': amount} for _ in range(count)]


def numbered_address(i):
    return '0x' + format(i, '064x')


@pytest.fixture
def sample_claims():
    """The four identical entries the script ships with."""
    return make_claims(4)


@pytest.fixture
def fake_node():
    """Canned JSON-RPC results keyed by method, plus a record of the calls."""
    calls = []

    async def rpc_call(method, params):
        calls.append((method, params))
        if method == 'sui_getObject':
            object_id = params[0]
            if object_id == info.claim_pool:
                owner = {'Shared': {'initial_shared_version': 3}}
            else:
                owner = {'AddressOwner': SAMPLE_ADDRESS}
            return {'data': {'objectId': object_id, 'version': '12',
                             'digest': OBJECT_DIGEST, 'owner': owner}}
        if method == 'suix_getReferenceGasPrice':
            return '750'
        if method == 'suix_getCoins':
            return {'data': [{'coinObjectId': numbered_address(0xc0), 'version': '9',
                              'digest': OBJECT_DIGEST, 'balance': '5000000000'}],
                    'hasNextPage': False, 'nextCursor': None}
        if method == 'sui_executeTransactionBlock':
            return {'digest': 'TxDigest111', 'effects': {'status': {'status': 'success'}}}
        raise AssertionError(f'unexpected rpc method {method}')

    rpc_call.calls = calls
    return rpc_call
