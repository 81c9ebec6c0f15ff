import base64
import hashlib
import json
import math

import aiohttp
import nacl.signing
from bip_utils import Bech32Decoder, Bip32Slip10Ed25519, Bip39SeedGenerator
from eth_utils import decode_hex, is_hex, remove_0x_prefix
from fake_useragent import UserAgent
from loguru import logger

import sui_bcs as bcs
from config import *
from info import *
from transaction import TransactionBlock, owned_object_arg, shared_object_arg


class SuiRpcError(Exception):
    def __init__(self, method, error):
        self.method = method
        self.error = error
        super().__init__(f'{method}: {error}')


class SuiTransactionError(Exception):
    def __init__(self, digest, status):
        self.digest = digest
        self.status = status
        super().__init__(f'transaction {digest} failed: {status}')


class InsufficientGasError(Exception):
    pass


def blake2b256(data):
    return hashlib.blake2b(data, digest_size=32).digest()


def is_valid_sui_address(address):
    if not isinstance(address, str) or not is_hex(address):
        return False
    return len(remove_0x_prefix(address)) == bcs.ADDRESS_LENGTH * 2


def make_batches(claims, size):
    if size <= 0:
        raise ValueError(f'batch size must be positive, got {size}')
    rounds = math.ceil(len(claims) / size)
    return [claims[i * size:(i + 1) * size] for i in range(rounds)]


def parse_claims(rows):
    claims = []
    for line, row in enumerate(rows, start=1):
        parts = row.split(',')
        if len(parts) != 2:
            raise ValueError(f'claims line {line}: expected "address,amount", got {row!r}')
        try:
            amount = int(parts[1])
        except ValueError:
            raise ValueError(f'claims line {line}: amount {parts[1].strip()!r} is not an integer') from None
        claims.append({'address': parts[0].strip(), 'amount': amount})
    return claims


def split_claims(batch):
    # filter whole pairs so addresses and amounts stay aligned
    valid = [claim for claim in batch if is_valid_sui_address(claim['address'])]
    return [claim['address'] for claim in valid], [claim['amount'] for claim in valid]


class SuiKeypair:
    def __init__(self, seed):
        if len(seed) != 32:
            raise ValueError(f'ed25519 secret key must be 32 bytes, got {len(seed)}')
        self.signing_key = nacl.signing.SigningKey(bytes(seed))
        self.public_key = self.signing_key.verify_key.encode()
        self.address = '0x' + blake2b256(bytes([ed25519_flag]) + self.public_key).hex()

    @classmethod
    def from_mnemonic(cls, mnemonic, path=derivation_path):
        if not mnemonic.strip():
            raise ValueError('empty mnemonic is not allowed')
        seed = Bip39SeedGenerator(mnemonic).Generate()
        return cls(Bip32Slip10Ed25519.FromSeedAndPath(seed, path).PrivateKey().Raw().ToBytes())

    @classmethod
    def from_secret(cls, secret):
        secret = secret.strip()
        if not secret:
            raise ValueError('empty secret is not allowed')
        if secret.startswith(private_key_prefix):
            return cls._from_flagged(Bech32Decoder.Decode(private_key_prefix, secret))
        if ' ' in secret:
            return cls.from_mnemonic(secret)
        if is_hex(secret) and len(remove_0x_prefix(secret)) == 64:
            return cls(decode_hex(secret))
        raw = base64.b64decode(secret, validate=True)
        if len(raw) == 33:
            return cls._from_flagged(raw)
        return cls(raw)

    @classmethod
    def _from_flagged(cls, raw):
        if raw[0] != ed25519_flag:
            raise ValueError(f'only ed25519 keys are supported, got scheme flag {raw[0]}')
        return cls(raw[1:])

    def sign_transaction(self, tx_bytes):
        digest = blake2b256(intent_prefix + tx_bytes)
        signature = self.signing_key.sign(digest).signature
        return base64.b64encode(bytes([ed25519_flag]) + signature + self.public_key).decode()


class SuiClaim:
    def __init__(self, privatekey, network=network, proxy=None):
        self.network = network
        self.rpc = rpcs[self.network]
        self.keypair = SuiKeypair.from_secret(privatekey)
        self.address = self.keypair.address
        self.proxy = f'http://{proxy}' if proxy else None

    async def rpc_call(self, method, params):
        headers = {
            'accept': 'application/json',
            'content-type': 'application/json',
            'user-agent': UserAgent().random,
        }
        json_data = {'jsonrpc': '2.0', 'id': 1, 'method': method, 'params': params}
        async with aiohttp.ClientSession() as session:
            async with session.post(self.rpc, json=json_data, headers=headers, proxy=self.proxy) as response:
                response.raise_for_status()
                data = json.loads(await response.text())
        if 'error' in data:
            raise SuiRpcError(method, data['error'])
        return data['result']

    async def resolve_object(self, object_id, mutable=True):
        response = await self.rpc_call('sui_getObject', [object_id, {'showOwner': True}])
        if 'error' in response:
            raise SuiRpcError('sui_getObject', response['error'])
        data = response['data']
        owner = data['owner']
        if isinstance(owner, dict) and 'Shared' in owner:
            return shared_object_arg(data['objectId'], owner['Shared']['initial_shared_version'], mutable)
        return owned_object_arg(data['objectId'], data['version'], data['digest'])

    async def get_gas_payment(self, budget):
        payment = []
        total = 0
        cursor = None
        while True:
            page = await self.rpc_call('suix_getCoins', [self.address, coin_type, cursor, 50])
            for coin in page['data']:
                payment.append(bcs.object_ref(coin['coinObjectId'], coin['version'], coin['digest']))
                total += int(coin['balance'])
                if total >= budget:
                    return payment
                if len(payment) >= max_gas_objects:
                    raise InsufficientGasError(
                        f'{self.address} - {max_gas_objects} coins hold only {total}, budget is {budget}')
            if not page.get('hasNextPage'):
                raise InsufficientGasError(f'{self.address} - balance {total} is below gas budget {budget}')
            cursor = page['nextCursor']

    async def add_claim_list(self, vec_address, vec_amount):
        if len(vec_address) > max_batch_size:
            logger.error(f'{self.address} - слишком много адресов в одном батче: {len(vec_address)} > {max_batch_size}...')
            return None
        if len(vec_address) != len(vec_amount):
            raise ValueError(f'{len(vec_address)} addresses but {len(vec_amount)} amounts')

        vec_address_bytes = bcs.ser('vector<address>', vec_address, max_size=max_pure_argument_size)
        vec_amount_bytes = bcs.ser('vector<u64>', vec_amount, max_size=max_pure_argument_size)

        tx = TransactionBlock()
        tx.set_gas_budget(gas_budget)
        tx.move_call(
            target=f'{claim_package}::{claim_module}::{claim_function}',
            arguments=[
                tx.object(await self.resolve_object(claim_pool)),
                tx.object(await self.resolve_object(claim_admin_cap)),
                tx.pure(vec_address_bytes),
                tx.pure(vec_amount_bytes),
            ],
            type_arguments=[coin_type],
        )

        gas_price = int(await self.rpc_call('suix_getReferenceGasPrice', []))
        payment = await self.get_gas_payment(gas_budget)
        tx_bytes = tx.build(self.address, payment, gas_price)
        signature = self.keypair.sign_transaction(tx_bytes)

        logger.info(f'{self.address}:{self.network} - отправляю {len(vec_address)} адресов в {claim_function}...')
        result = await self.rpc_call('sui_executeTransactionBlock', [
            base64.b64encode(tx_bytes).decode(),
            [signature],
            {'showEffects': True, 'showObjectChanges': True},
            'WaitForLocalExecution',
        ])
        print({'result': result})

        digest = result.get('digest')
        status = result.get('effects', {}).get('status', {})
        if status.get('status') != 'success':
            logger.error(f'{self.address}:{self.network} - транзакция {digest} не прошла: {status}')
            raise SuiTransactionError(digest, status)
        logger.success(f'{self.address}:{self.network} - успешно добавил {len(vec_address)} адресов: {scans[self.network]}{digest}')
        return result

    async def add_claims(self, claims, batch_size=batch_size):
        batches = make_batches(claims, batch_size)
        results = []
        for i, batch in enumerate(batches, start=1):
            vec_address, vec_amount = split_claims(batch)
            dropped = len(batch) - len(vec_address)
            if dropped:
                logger.warning(f'{self.address} - батч {i}/{len(batches)}: пропущено {dropped} невалидных адресов...')
            logger.info(f'{self.address} - батч {i}/{len(batches)}: {len(vec_address)} адресов...')
            results.append(await self.add_claim_list(vec_address, vec_amount))
        return results
