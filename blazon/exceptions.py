# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
'''

from typing import Any

from .reprs import repr_lim


class FragmentTypeError(TypeError):
  '''
  Raised when a markup constructor, sequencing operation, or attribute application receives a value of the wrong type.
  For example, a plain `str` passed where an `Html` fragment is required;
  strings must be converted explicitly with `text` or `pre_escaped_text` so that escaping is never implicit.
  '''
  def __init__(self, expected:str, received:Any) -> None:
    self.expected = expected
    self.received = received
    super().__init__(f'expected {expected}; received {type(received).__name__}: {repr_lim(received)}')
