# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import environ
from sys import stderr
from typing import Any


_true_strs = frozenset(['1', 't', 'true', 'y', 'yes', 'on'])


def is_casesplit_dbg() -> bool:
  '''
  Return True if the environment has CASESPLIT_DBG set to a common true-like string value, in any case.
  Any other value, including an unrecognized one, leaves tracing off.
  '''
  return environ.get('CASESPLIT_DBG', '').strip().lower() in _true_strs


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)
