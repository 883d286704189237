# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections import OrderedDict
from types import MappingProxyType

from casesplit import Const, Handler, match, match_by_subject, NoMatchingCase
from utest import utest, utest_call, utest_exc, utest_val


cases = {'a': 1, 'b': lambda x: x + 1}

# Constants are returned as is; handlers are called with the subject value.
utest(6, match, cases, {'b': 5})
utest(1, match, cases, {'a': 5})
utest('literal', match, {'a': 'literal'}, {'a': 99})
utest(None, match, {'a': None}, {'a': 99})
utest(99, match, {'a': lambda x: x}, {'a': 99})

# Falsy subject values are still passed to handlers.
utest(0, match, {'a': lambda x: x}, {'a': 0})
utest([], match, {'a': lambda x: x}, {'a': []})

# Explicit case variants.
utest(len, match, {'a': Const(len)}, {'a': 'abc'})
utest(3, match, {'a': Handler(len)}, {'a': 'abc'})
utest(3, match, {'a': len}, {'a': 'abc'})

# Classes are callable, so they are invoked unless wrapped in Const.
utest(5, match, {'n': int}, {'n': '5'})
utest(int, match, {'n': Const(int)}, {'n': '5'})

# The first case key owned by the subject wins; scan order is the case table's.
utest('A', match, {'a': 'A', 'b': 'B'}, {'b': 0, 'a': 0})
utest('B', match, {'b': 'B', 'a': 'A'}, {'a': 0, 'b': 0})

# Extra subject keys not in the table are ignored.
utest('A', match, {'a': 'A'}, {'x': 0, 'a': 0})

# Other mapping types.
utest(6, match, MappingProxyType(cases), OrderedDict(b=5))


# Currying.
describe = match({'ok': lambda v: f'got {v}', 'err': 'failed'})
utest('got 3', describe, {'ok': 3})
utest('failed', describe, {'err': 'bad'})
utest_exc(NoMatchingCase, describe, {'other': 1})
utest_val('match_closure', describe.__name__, 'closure name')
utest_val(match.__doc__, describe.__doc__, 'closure doc')

for subject in [{'a': 1}, {'b': 2}, {'a': 3, 'b': 4}]:
  utest(match(cases, subject), match(cases), subject)
  utest(match(cases, subject), match, cases, subject) # Idempotent for pure handlers.

utest_val(True, callable(match(cases, None)), 'explicit None curries')


# No match.
utest_exc(NoMatchingCase, match, {'a': 1}, {'z': 2})
utest_exc(NoMatchingCase, match, {}, {'z': 2})
utest_exc(NoMatchingCase, match, {'a': 1}, {}) # An empty subject is matched, not curried.
utest_exc(KeyError, match, {'a': 1}, {'z': 2})


@utest_call
def test_no_match_message() -> None:
  subject = {'z': 2}
  table = {'a': 1}
  try: match(table, subject)
  except NoMatchingCase as e:
    utest_val('no case for {"z":2}', str(e), 'message')
    utest_val(True, '{"z":2}' in str(e), 'message contains subject json')
    utest_val(subject, e.subject, 'subject')
    utest_val(table, e.cases, 'cases')
  else:
    utest_val('NoMatchingCase', None, 'expected exception')


# Handler exceptions propagate unchanged.
def fail(v:int) -> int: raise ValueError(v)

utest_exc(ValueError(7), match, {'a': fail}, {'a': 7})


# Subject order scan.
utest(6, match_by_subject, cases, {'b': 5})
utest(3, match_by_subject, {'a': Handler(len)}, {'a': 'abc'})
utest('B', match_by_subject, {'a': lambda v: 'A', 'b': lambda v: 'B'}, {'b': 0, 'a': 0})
utest('A', match_by_subject, {'b': lambda v: 'B', 'a': lambda v: 'A'}, {'a': 0, 'b': 0})
utest(5, match_by_subject(cases), {'b': 4})
utest_exc(NoMatchingCase, match_by_subject, cases, {'z': 2})
utest_exc(NoMatchingCase, match_by_subject, cases, {})

# No constant shortcut: a plain value is called and fails.
utest_exc(TypeError, match_by_subject, {'a': 'literal'}, {'a': 99})
utest_exc(TypeError, match_by_subject, {'a': Const('literal')}, {'a': 99})

# The two scan orders disagree when a subject owns several case keys.
both = {'a': lambda v: 'A', 'b': lambda v: 'B'}
utest('A', match, both, {'b': 0, 'a': 0})
utest('B', match_by_subject, both, {'b': 0, 'a': 0})


@utest_call
def test_no_match_message_mapping_subject() -> None:
  for subject, exp in [
    (MappingProxyType({'z': 2}), 'no case for {"z":2}'),
    ({'z': MappingProxyType({'y': 1})}, 'no case for {"z":{"y":1}}'),
  ]:
    try: match({'a': 1}, subject)
    except NoMatchingCase as e: utest_val(exp, str(e), 'message')
    else: utest_val('NoMatchingCase', None, 'expected exception')
