
import base64, time

base36_digits = '0123456789abcdefghijklmnopqrstuvwxyz'

def to_base36(n):
  """
  Renders an integer in lowercase base 36, the way JavaScript's
  Number.prototype.toString(36) does for integers.

  >>> to_base36(0)
  '0'
  >>> to_base36(35)
  'z'
  >>> to_base36(36)
  '10'
  >>> to_base36(1295)
  'zz'
  >>> to_base36(46656)
  '1000'
  >>> to_base36(-1000)
  '-rs'
  """
  n = int(n)
  if n < 0:
    return '-' + to_base36(-n)
  if n == 0:
    return '0'
  digits = []
  while n:
    n, d = divmod(n, 36)
    digits.append(base36_digits[d])
  return ''.join(reversed(digits))

def random_base36_token(rng, length):
  """
  length base-36 digits drawn from rng, which only needs a
  randrange() method (the random module, random.Random(seed), ...).

  rng decides how guessable this is; with the plain random
  module it is NOT suitable as a secret on its own.

  >>> import random
  >>> len(random_base36_token(random.Random(1), 20))
  20
  >>> random_base36_token(random.Random(1), 0)
  ''
  """
  return ''.join(base36_digits[rng.randrange(36)] for _ in range(length))

def base64_text(data):
  """
  Standard base64 (with padding, no line breaks) as a str.
  str arguments are encoded as UTF-8 first.

  >>> base64_text(b'\\x00\\x01\\x02')
  'AAEC'
  >>> base64_text('hello')
  'aGVsbG8='
  """
  if isinstance(data, str):
    data = data.encode('utf-8')
  return base64.b64encode(data).decode('ascii')

def milliseconds_since_epoch():
  return int(time.time() * 1000)
