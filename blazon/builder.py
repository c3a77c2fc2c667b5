# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`builder` provides the `Builder` class, an append-only accumulator of UTF-8 byte chunks with HTML escaping.
'''

from html import escape as _escape
from typing import Iterable, List, Self


def esc_text(text:str) -> str:
  '''
  Replace the characters that are reserved in markup text and double- or single-quoted attribute values
  with entity references: `&`, `<`, `>`, `"` and `'`.
  '''
  return _escape(text, quote=True)


def encode_text(text:str) -> bytes:
  'Encode `text` as UTF-8. Unencodable code points (lone surrogates) are replaced with "?" rather than raising.'
  return text.encode('utf-8', errors='replace')


def escape_to_bytes(text:str) -> bytes:
  'Escape `text` and encode it as UTF-8.'
  return encode_text(esc_text(text))


class Builder:
  '''
  Append-only list of byte chunks.
  Appends are amortized O(1); `flush` joins all chunks once, in time linear in the total size.
  A builder is local to a single render and is never shared between threads.
  '''

  __slots__ = ('chunks', '_len')

  def __init__(self, chunks:Iterable[bytes]=()) -> None:
    self.chunks:List[bytes] = list(chunks)
    self._len = sum(len(c) for c in self.chunks)


  def __repr__(self) -> str: return f'Builder(chunks={len(self.chunks)}, len={self._len})'

  def __len__(self) -> int: return self._len


  @classmethod
  def empty(cls) -> 'Builder':
    return cls()


  def append_raw(self, chunk:bytes) -> Self:
    'Append `chunk` verbatim; no escaping or validation.'
    if chunk:
      self.chunks.append(chunk)
      self._len += len(chunk)
    return self


  def append_escaped_text(self, text:str) -> Self:
    return self.append_raw(escape_to_bytes(text))


  def append_ascii_char(self, char:str) -> Self:
    'Append a single structural ASCII character such as `>` or `"`.'
    if len(char) != 1 or not char.isascii(): raise ValueError(f'expected a single ASCII character; received: {char!r}')
    self.chunks.append(char.encode('ascii'))
    self._len += 1
    return self


  def extend(self, other:'Builder') -> Self:
    'Append all of the chunks of `other`. `other` is left unchanged.'
    self.chunks.extend(other.chunks)
    self._len += other._len
    return self


  def flush(self) -> bytes:
    'Materialize the accumulated output.'
    return b''.join(self.chunks)
