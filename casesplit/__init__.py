# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
casesplit performs tagged-union style dispatch over plain key/value records.
'''

from .case import Case, case_of, Const, Handler
from .exceptions import NoMatchingCase
from .render import render_subject
from .split import CaseTable, match, match_by_subject, SplitFn, Subject


__all__ = [
  'Case',
  'case_of',
  'CaseTable',
  'Const',
  'Handler',
  'match',
  'match_by_subject',
  'NoMatchingCase',
  'render_subject',
  'SplitFn',
  'Subject',
]
