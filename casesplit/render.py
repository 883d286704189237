# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import json as _json
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from functools import singledispatch
from typing import Any


@singledispatch
def encode_obj(obj:Any) -> Any:
  '''
  Encode an arbitrary value found inside a subject for JSON rendering.
  Iterables become lists and dataclass instances become dicts; anything else is rendered by its repr.
  '''
  if is_dataclass(obj) and not isinstance(obj, type): return asdict(obj)

  try: it = iter(obj)
  except TypeError: pass
  else: return list(it)

  return repr(obj)


@encode_obj.register
def _(obj:Mapping) -> Any: return dict(obj) # Non-dict mappings would otherwise iterate as their keys.

@encode_obj.register
def _(obj:type) -> Any: return obj.__name__


def render_subject(subject:Any) -> str:
  '''
  Render `subject` as compact JSON, preserving key order, e.g. `{"z":2}`.
  Falls back to the repr of the subject if it cannot be rendered as JSON.
  '''
  try: return _json.dumps(subject, default=encode_obj, separators=(',', ':'), ensure_ascii=False)
  except (TypeError, ValueError): return repr(subject) # Unrenderable keys or circular references.
