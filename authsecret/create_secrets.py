#!/usr/bin/env python3
import os, sys, subprocess, random, getopt
from shutil import which

from . import utils

SECRET_NUM_BYTES = 32
FALLBACK_SECRET_LENGTH = 43
DEFAULT_SECRET_NAME = 'BETTER_AUTH_SECRET'

def strong_secret(num_bytes = SECRET_NUM_BYTES):
  """
  num_bytes bytes from the OS's cryptographic random source,
  base64-encoded.  The default 32 bytes give 256 bits of entropy
  and a 44-character string.
  """
  return utils.base64_text(os.urandom(num_bytes)).strip()

def openssl_secret(num_bytes = SECRET_NUM_BYTES, openssl_command = 'openssl'):
  """
  Same format as strong_secret(), but asks `openssl rand -base64`
  for the bytes.  Requires openssl_command to be on PATH.

  Raises FileNotFoundError if it isn't, CalledProcessError if it
  exits nonzero, ValueError if it prints nothing.
  """
  if not which(openssl_command):
    raise FileNotFoundError('{} not found on PATH'.format(openssl_command))
  out = subprocess.check_output(
    [openssl_command, 'rand', '-base64', str(num_bytes)],
    stdin=subprocess.DEVNULL)
  # openssl wraps base64 output at 64 columns
  secret = ''.join(out.decode('ascii').split())
  if not secret:
    raise ValueError('{} rand printed nothing'.format(openssl_command))
  return secret

def fallback_secret(rng = random, clock = utils.milliseconds_since_epoch):
  """
  WEAK.  Only for when no strong random source works.

  base-36 digits from a non-cryptographic rng, followed by the
  current time in milliseconds in base 36, base64-encoded and cut
  to FALLBACK_SECRET_LENGTH characters.  Anyone who can guess
  roughly when it was made and the state of rng can guess it.

  The token is sized so the whole thing is 32 bytes (when the
  timestamp fits), so the cut only removes base64 padding and
  every timestamp digit is kept.

  >>> import random
  >>> s = fallback_secret(random.Random(0), lambda: 0)
  >>> len(s)
  43
  >>> import base64
  >>> base64.b64decode(s + '=')[-1:]
  b'0'
  """
  timestamp = utils.to_base36(clock())
  token = utils.random_base36_token(rng, max(0, SECRET_NUM_BYTES - len(timestamp)))
  return utils.base64_text(token + timestamp)[:FALLBACK_SECRET_LENGTH]

def generate(strong_source = strong_secret):
  """
  Returns a secret suitable for BETTER_AUTH_SECRET.  Never raises.

  Uses strong_source() (by default strong_secret()).  If that fails
  in any way, writes a warning to stderr and returns a
  fallback_secret() instead, which is much weaker.
  """
  try:
    secret = (strong_source() or '').strip()
    if not secret:
      raise ValueError('strong random source returned an empty string')
    return secret
  except Exception as e:
    sys.stderr.write(
      'Warning: failed to generate {} with a strong random source ({}: {}); '
      'using a weaker fallback value.\n'.format(
        DEFAULT_SECRET_NAME, type(e).__name__, e))
    return fallback_secret()

def secret_from_environment(environ = None, name = DEFAULT_SECRET_NAME, generator = generate):
  """
  The configured value of environment variable `name` if it is set
  and not blank, otherwise a newly generated one.  Doesn't store
  anything; persisting a generated secret is up to the caller.
  """
  if environ is None:
    environ = os.environ
  existing = (environ.get(name) or '').strip()
  if existing:
    return existing
  return generator()

usage = """usage: {argv0} [--name NAME] [--openssl] [--reuse]
  Prints NAME=<random secret>, e.g. to append to a .env file.
  --name NAME  variable name to print (default {default_name})
  --openssl    get random bytes from `openssl rand` instead of the OS
  --reuse      print the value already in the environment, if any
"""

def main(argv = None):
  if argv is None:
    argv = sys.argv[1:]
  usage_text = usage.format(argv0='authsecret', default_name=DEFAULT_SECRET_NAME)
  try:
    opts, args = getopt.getopt(argv, 'h', ['help', 'name=', 'openssl', 'reuse'])
  except getopt.GetoptError as e:
    sys.stderr.write(str(e) + '\n' + usage_text)
    return 2
  if args:
    sys.stderr.write('unexpected arguments: {}\n'.format(' '.join(args)) + usage_text)
    return 2

  name = DEFAULT_SECRET_NAME
  strong_source = strong_secret
  reuse = False
  for opt, val in opts:
    if opt in ('-h', '--help'):
      sys.stdout.write(usage_text)
      return 0
    elif opt == '--name':
      name = val
      if not name:
        sys.stderr.write('--name needs a non-empty variable name\n' + usage_text)
        return 2
    elif opt == '--openssl':
      strong_source = openssl_secret
    elif opt == '--reuse':
      reuse = True

  make = lambda: generate(strong_source)
  secret = secret_from_environment(name=name, generator=make) if reuse else make()
  print(name + '=' + secret)
  return 0

if __name__ == '__main__':
  sys.exit(main())
