# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tagged-union dispatch over plain key/value records.

A subject is a mapping that conventionally owns exactly one key naming its variant, e.g. `{'ok': 3}` or `{'err': 'bad'}`.
A case table maps variant keys to constants or unary handlers.

# Usage
```
describe = match({'ok': lambda v: f'got {v}', 'err': 'failed'})
describe({'ok': 3}) # 'got 3'
describe({'err': 'bad'}) # 'failed'
```
'''

from functools import update_wrapper
from typing import Any, Callable, Mapping, NoReturn, TypeAlias

from .case import Const, Handler, case_of
from .env import errL, is_casesplit_dbg
from .exceptions import NoMatchingCase
from .render import render_subject


CaseTable:TypeAlias = Mapping[str,Any]
Subject:TypeAlias = Mapping[str,Any]
SplitFn:TypeAlias = Callable[[Subject],Any]


def match(cases:CaseTable, subject:Subject|None=None) -> Any:
  '''
  Dispatch `subject` over `cases`, scanning the keys of `cases` in order.
  The first case key owned by the subject selects the case:
  a constant is returned as is; a handler is called with the subject's value at that key.
  If `subject` is omitted, return a function that performs the match when called with a subject.
  Raises `NoMatchingCase` if the subject owns none of the case keys.
  '''
  if subject is None: return _curry(match, _split_by_cases, cases)
  return _split_by_cases(cases, subject)


def match_by_subject(cases:CaseTable, subject:Subject|None=None) -> Any:
  '''
  Dispatch `subject` over `cases`, scanning the keys of `subject` in order.
  The first subject key present in `cases` selects the case, which is always called with the subject's value.
  Unlike `match`, there is no constant shortcut: a non-callable case value raises the usual TypeError.
  If `subject` is omitted, return a function that performs the match when called with a subject.
  '''
  if subject is None: return _curry(match_by_subject, _split_by_subject, cases)
  return _split_by_subject(cases, subject)


def _curry(public_fn:Callable, split_fn:Callable[[CaseTable,Subject],Any], cases:CaseTable) -> SplitFn:

  def match_closure(subject:Subject) -> Any:
    return split_fn(cases, subject)

  update_wrapper(match_closure, public_fn, assigned=('__module__', '__doc__'))
  match_closure.cases = cases # type: ignore[attr-defined]
  return match_closure


def _split_by_cases(cases:CaseTable, subject:Subject) -> Any:
  dbg = is_casesplit_dbg()
  for key, value in cases.items():
    if key not in subject: continue
    selected = case_of(value)
    if dbg: errL(f'casesplit: match: {key!r} -> {type(selected).__name__}')
    match selected:
      case Const(const): return const
      case Handler(fn): return fn(subject[key])
  _no_match(cases, subject, dbg)


def _split_by_subject(cases:CaseTable, subject:Subject) -> Any:
  dbg = is_casesplit_dbg()
  for key, subject_value in subject.items():
    if key not in cases: continue
    fn = cases[key]
    if isinstance(fn, Handler): fn = fn.fn
    if dbg: errL(f'casesplit: match_by_subject: {key!r} -> {type(fn).__name__}')
    return fn(subject_value)
  _no_match(cases, subject, dbg)


def _no_match(cases:CaseTable, subject:Subject, dbg:bool) -> NoReturn:
  if dbg: errL(f'casesplit: no case for {render_subject(subject)}')
  raise NoMatchingCase(subject, cases)
