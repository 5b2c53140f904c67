from base64 import b64decode, b64encode

ID_BYTES = 8
PUBLIC_KEY_BYTES = 32
PRIVATE_KEY_BYTES = 64

PUBLIC_CREDENTIAL_BYTES = ID_BYTES + PUBLIC_KEY_BYTES
PRIVATE_CREDENTIAL_BYTES = ID_BYTES + PRIVATE_KEY_BYTES


def encode_credential(identifier, key):
    '''
    the identifier always goes first, then the key material.
    standard (padded) base64, not urlsafe
    '''
    if len(identifier) != ID_BYTES:
        raise ValueError('identifier must be {} bytes, got {}'.format(ID_BYTES, len(identifier)))
    return b64encode(bytes(identifier) + bytes(key)).decode('ascii')


def decode_credential(credential):
    return b64decode(credential, validate=True)


def split_credential(credential, expected_bytes=None):
    bites = decode_credential(credential)
    allowed = (expected_bytes,) if expected_bytes else (PUBLIC_CREDENTIAL_BYTES, PRIVATE_CREDENTIAL_BYTES)
    if len(bites) not in allowed:
        raise ValueError('unexpected credential length: {}'.format(len(bites)))
    return bites[:ID_BYTES], bites[ID_BYTES:]


def split_public_credential(credential):
    return split_credential(credential, PUBLIC_CREDENTIAL_BYTES)


def split_private_credential(credential):
    return split_credential(credential, PRIVATE_CREDENTIAL_BYTES)


def buyer_id(credential):
    # read as a little endian uint64
    identifier, _ = split_credential(credential)
    return int.from_bytes(identifier, 'little')


def check_pair(public_credential, private_credential):
    '''
    both halves have to carry the same buyer id.
    returns it, or raises ValueError
    '''
    public_id, _ = split_public_credential(public_credential)
    private_id, _ = split_private_credential(private_credential)
    if public_id != private_id:
        raise ValueError('mismatch between public and private buyer id')
    return int.from_bytes(public_id, 'little')
