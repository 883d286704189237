# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, Mapping

from .render import render_subject


class NoMatchingCase(KeyError):
  '''
  Raised when no key of the case table is owned by the subject.
  Since it arises from a key lookup, it subclasses KeyError.
  '''

  def __init__(self, subject:Any, cases:Mapping[str,Any]|None=None) -> None:
    self.subject = subject
    self.cases = cases
    super().__init__(f'no case for {render_subject(subject)}')

  def __str__(self) -> str:
    return str(self.args[0]) # KeyError would otherwise show the repr of the message.
