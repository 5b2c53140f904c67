#!/usr/bin/python3

"""Network Next buyer key generator

Generates an Ed25519 keypair, prefixes both halves with a random 8 byte buyer id,
and prints them (base64) to the console. Nothing is saved to disk.

Usage:
  next-keygen
  next-keygen (-h | --help)
  next-keygen --version

Examples:
  next-keygen
  python -m nnkeygen.keygen

Options:
  -h --help                        Show this help.
  --version                        Show version.
"""
import sys
from collections import namedtuple

from docopt import docopt
from nacl.bindings import crypto_sign_keypair, crypto_sign_seed_keypair
from nacl.exceptions import CryptoError
from nacl.utils import random as nacl_random

from nnkeygen.lib.credential import ID_BYTES, encode_credential


VERSION = 'nnkeygen 1.0.0'

Credentials = namedtuple('Credentials', ['public', 'private'])


def generate_keypair(seed=None):
    # private key is seed + public key, 64 bytes. Same layout as go's crypto/ed25519
    if seed is None:
        return crypto_sign_keypair()
    return crypto_sign_seed_keypair(seed)


def generate(identifier=None, seed=None):
    if identifier is None:
        identifier = nacl_random(ID_BYTES)
    public_key, private_key = generate_keypair(seed)
    return Credentials(
        encode_credential(identifier, public_key),
        encode_credential(identifier, private_key),
    )


def format_credentials(credentials):
    return (
        '\nWelcome to Network Next!\n\n'
        'This is your public key:\n\n    {public}\n\n'
        'This is your private key:\n\n    {private}\n\n'
        "IMPORTANT: Save your private key in a secure place and don't share it with anybody, not even us!\n\n"
    ).format(public=credentials.public, private=credentials.private)


def generate_and_print(out=None):
    out = out or sys.stdout
    credentials = generate()
    out.write(format_credentials(credentials))
    out.flush()
    return credentials


def main():
    docopt(__doc__, version=VERSION)
    try:
        generate_and_print()
    except (CryptoError, OSError, RuntimeError) as e:
        print('fatal: {}'.format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
