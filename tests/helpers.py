import sys
from os import environ, path
from subprocess import PIPE, run

from nacl.signing import SigningKey

KEYGEN_ROOT = path.abspath(path.join(path.dirname(path.realpath(__file__)), '..'))

# only for testing. obviously.
SAMPLE_SEED = bytes(range(32))
SAMPLE_ID = b'\x00' * 8


def _program_args():
    if 'coverage' in environ.get('_', ''):
        return ['coverage', 'run', '-a', '-m', 'nnkeygen.keygen']
    else:
        return [sys.executable, '-u', '-m', 'nnkeygen.keygen']


def sample_keys(seed=SAMPLE_SEED):
    '''
    (public, private) computed the long way, via nacl.signing
    '''
    sk = SigningKey(seed)
    public = bytes(sk.verify_key)
    return public, seed + public


def run_keygen(*args, env=None):
    '''
    runs the real thing in a subprocess -> (returncode, stdout lines)
    '''
    env = dict(env or environ)
    env['PYTHONPATH'] = KEYGEN_ROOT
    res = run(_program_args() + list(args), env=env, stdout=PIPE, stderr=PIPE)
    return res.returncode, res.stdout.decode('utf-8').split('\n')
