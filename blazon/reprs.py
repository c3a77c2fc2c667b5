# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any


def repr_lim(obj:Any, limit=64) -> str:
  'Return a repr of `obj` that is at most `limit` characters long.'
  r = repr(obj)
  if limit > 2 and len(r) > limit:
    q = r[0]
    if q in '\'"': return f'{r[:limit-2]}{q}…'
    else: return f'{r[:limit-1]}…'
  return r


def repr_chunk(chunk:bytes, limit=32) -> str:
  'Return a short textual repr of a rendered byte chunk, for fragment reprs.'
  return repr_lim(chunk.decode('utf-8', errors='replace'), limit=limit)
