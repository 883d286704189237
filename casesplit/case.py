# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Explicit case variants for case tables.

A raw case value is interpreted by whether it is callable;
wrapping it in `Const` or `Handler` states the intent explicitly.
'''

from dataclasses import dataclass
from typing import Any, Callable, TypeAlias


@dataclass(frozen=True, slots=True)
class Const:
  'A case that always produces `value`, ignoring the subject value.'
  value:Any


@dataclass(frozen=True, slots=True)
class Handler:
  'A case that applies `fn` to the subject value.'
  fn:Callable[[Any],Any]

  def __call__(self, subject_value:Any) -> Any:
    return self.fn(subject_value)


Case:TypeAlias = Const|Handler


def case_of(value:Any) -> Case:
  '''
  Coerce a raw case value to a `Case`.
  `Const` and `Handler` pass through unchanged; callables become `Handler` and everything else becomes `Const`.
  Note that classes are callable, so a bare class is treated as a handler that constructs an instance.
  '''
  if isinstance(value, (Const, Handler)): return value
  if callable(value): return Handler(value)
  return Const(value)
