"""Minimal BCS encoder for the values sent in a claim-list transaction.

Only serialization is needed: everything read back from the node arrives
as JSON.
"""
import struct

from bip_utils import Base58Decoder
from eth_utils import decode_hex, remove_0x_prefix

ADDRESS_LENGTH = 32


class BcsError(ValueError):
    pass


def uleb128(value):
    if value < 0:
        raise BcsError(f'uleb128 cannot encode negative value {value}')
    out = bytearray()
    while True:
        byte = value & 0x7f
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _uint(fmt, bits, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise BcsError(f'u{bits} expects an integer, got {value!r}')
    if not 0 <= value < 1 << bits:
        raise BcsError(f'{value} is out of range for u{bits}')
    return struct.pack(fmt, value)


def u8(value):
    return _uint('<B', 8, value)


def u16(value):
    return _uint('<H', 16, value)


def u64(value):
    return _uint('<Q', 64, value)


def boolean(value):
    return b'\x01' if value else b'\x00'


def address(value):
    hex_part = remove_0x_prefix(value).lower()
    if len(hex_part) > ADDRESS_LENGTH * 2:
        raise BcsError(f'address {value} is longer than {ADDRESS_LENGTH} bytes')
    try:
        return decode_hex(hex_part.zfill(ADDRESS_LENGTH * 2))
    except ValueError as e:
        raise BcsError(f'address {value} is not valid hex') from e


def string(value):
    data = value.encode('utf-8')
    return uleb128(len(data)) + data


def byte_vector(value):
    return uleb128(len(value)) + bytes(value)


def vector(items, encode):
    items = list(items)
    return uleb128(len(items)) + b''.join(encode(item) for item in items)


def object_digest(value):
    digest = Base58Decoder.Decode(value)
    if len(digest) != 32:
        raise BcsError(f'object digest {value} is not 32 bytes')
    return byte_vector(digest)


def object_ref(object_id, version, digest):
    return address(object_id) + u64(int(version)) + object_digest(digest)


_primitives = {
    'u8': u8,
    'u16': u16,
    'u64': u64,
    'bool': boolean,
    'address': address,
    'string': string,
}

# TypeTag variant indices
_type_tags = {'bool': 0, 'u8': 1, 'u64': 2, 'u128': 3, 'address': 4,
              'signer': 5, 'u16': 8, 'u32': 9, 'u256': 10}
_VECTOR_TAG = 6
_STRUCT_TAG = 7


def _vector_inner(type_name):
    if type_name.startswith('vector<') and type_name.endswith('>'):
        return type_name[len('vector<'):-1].strip()
    return None


def encoder_for(type_name):
    type_name = type_name.strip()
    inner = _vector_inner(type_name)
    if inner is not None:
        encode_item = encoder_for(inner)
        return lambda value: vector(value, encode_item)
    try:
        return _primitives[type_name]
    except KeyError:
        raise BcsError(f'unsupported BCS type {type_name}') from None


def ser(type_name, value, max_size=None):
    """Serialize ``value`` as ``type_name`` (e.g. ``vector<address>``).

    Raises BcsError when the encoding is longer than ``max_size`` bytes.
    """
    data = encoder_for(type_name)(value)
    if max_size is not None and len(data) > max_size:
        raise BcsError(f'{type_name} serialized to {len(data)} bytes, limit is {max_size}')
    return data


def type_tag(type_name):
    type_name = type_name.strip()
    inner = _vector_inner(type_name)
    if inner is not None:
        return uleb128(_VECTOR_TAG) + type_tag(inner)
    if type_name in _type_tags:
        return uleb128(_type_tags[type_name])
    if '<' in type_name:
        raise BcsError(f'generic struct type arguments are not supported: {type_name}')
    parts = type_name.split('::')
    if len(parts) != 3:
        raise BcsError(f'cannot parse type tag {type_name}')
    struct_address, module, name = parts
    return uleb128(_STRUCT_TAG) + address(struct_address) + string(module) + string(name) + uleb128(0)
