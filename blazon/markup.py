# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides the `Html` fragment type and the combinators for building and rendering it.

A fragment is conceptually a mapping from a pending attribute chunk (the bytes destined for the fragment's own opening tag)
to its rendered bytes. Attributes are attached after an element is constructed, possibly after its content is known,
yet they must appear in the output inside the opening tag, before that content.
Each applied `Attribute` therefore wraps the fragment, and the chunks accumulate on the way down to the element
that actually writes its opening tag.

Example:

  img = open_tag('img')
  p = parent(open_tag('p'), close_tag('p'))
  doc = (p @ attr('class', 'note'))(text('5 < 3') + leaf(img) @ attr('src', 'a.png'))
  render_html(doc) == b'<p class="note">5 &lt; 3<img src="a.png" /></p>'

Attributes chained on a single element are emitted in reverse order of application:
`leaf(img) @ a1 @ a2` renders as `<img a2 a1 />`.

Tags, attribute values and attributes are precomputed byte chunks; build them once (typically as module constants)
and reuse them across renders. All values are immutable and can be rendered concurrently from multiple threads.
'''

from typing import Any, Iterable, Iterator, List, Optional, overload, Tuple, Union

from .builder import Builder, encode_text, escape_to_bytes
from .exceptions import FragmentTypeError
from .reprs import repr_chunk


# The pending attribute chunks for a single element, as a linked list with the innermost (earliest applied) chunk first.
AttrChunks = Optional[Tuple[bytes,'AttrChunks']]

# A render work item: either a chunk to write, or a fragment paired with its pending attribute chunks.
_WorkItem = Union[bytes,Tuple['Html',AttrChunks]]

_no_attrs:AttrChunks = None


def _write_attrs(attrs:AttrChunks, builder:Builder) -> None:
  'Write pending attribute chunks, most recently applied first.'
  chunks:List[bytes] = []
  while attrs is not None:
    chunk, attrs = attrs
    chunks.append(chunk)
  for chunk in reversed(chunks): builder.append_raw(chunk)


class Tag:
  '''
  An immutable, pre-escaped byte chunk for a piece of tag syntax:
  the start of an opening tag (`<p`), a closing tag (`</p>`), or an attribute key (` class="`).
  The text is encoded once at construction and never escaped or rescanned afterwards.
  '''

  __slots__ = ('chunk',)

  chunk:bytes

  def __init__(self, chunk:str|bytes) -> None:
    if isinstance(chunk, str): chunk = encode_text(chunk)
    elif not isinstance(chunk, bytes): raise FragmentTypeError('`str` or `bytes` tag', chunk)
    object.__setattr__(self, 'chunk', chunk)

  def __repr__(self) -> str: return f'Tag({repr_chunk(self.chunk)})'

  def __setattr__(self, name:str, val:Any) -> None: raise AttributeError('Tag is immutable')

  def __reduce__(self) -> tuple: return (Tag, (self.chunk,))

  def __eq__(self, other:Any) -> bool: return isinstance(other, Tag) and self.chunk == other.chunk

  def __hash__(self) -> int: return hash((Tag, self.chunk))

  def __add__(self, other:'Tag') -> 'Tag':
    if not isinstance(other, Tag): return NotImplemented
    return Tag(self.chunk + other.chunk)


class AttributeValue:
  '''
  An immutable byte chunk for the value part of an attribute (the text inside the quotes).
  Use `text_value` to escape the value at construction, or `pre_escaped_text_value` to trust it as is.
  '''

  __slots__ = ('chunk',)

  chunk:bytes

  def __init__(self, chunk:bytes) -> None:
    if not isinstance(chunk, bytes): raise FragmentTypeError('`bytes` attribute value chunk', chunk)
    object.__setattr__(self, 'chunk', chunk)

  def __repr__(self) -> str: return f'AttributeValue({repr_chunk(self.chunk)})'

  def __setattr__(self, name:str, val:Any) -> None: raise AttributeError('AttributeValue is immutable')

  def __reduce__(self) -> tuple: return (AttributeValue, (self.chunk,))

  def __eq__(self, other:Any) -> bool: return isinstance(other, AttributeValue) and self.chunk == other.chunk

  def __hash__(self) -> int: return hash((AttributeValue, self.chunk))

  def __add__(self, other:'AttributeValue') -> 'AttributeValue':
    if not isinstance(other, AttributeValue): return NotImplemented
    return AttributeValue(self.chunk + other.chunk)


class Attribute:
  '''
  A deferred transformation that places a `key="value"` chunk inside the opening tag of the fragment it is applied to.
  Apply it with `fragment @ attribute`, `element @ attribute`, or by calling it on a fragment.
  '''

  __slots__ = ('chunk',)

  chunk:bytes

  def __init__(self, key:Tag, value:AttributeValue) -> None:
    if not isinstance(key, Tag): raise FragmentTypeError('`Tag` attribute key', key)
    if not isinstance(value, AttributeValue): raise FragmentTypeError('`AttributeValue`', value)
    object.__setattr__(self, 'chunk', key.chunk + value.chunk + b'"')

  def __repr__(self) -> str: return f'Attribute({repr_chunk(self.chunk)})'

  def __setattr__(self, name:str, val:Any) -> None: raise AttributeError('Attribute is immutable')

  def __reduce__(self) -> tuple: return (_attribute_from_chunk, (self.chunk,))

  def __call__(self, html:'Html') -> 'Html':
    if not isinstance(html, Html): raise FragmentTypeError('`Html` fragment', html)
    return Attributed(html, self)


def _attribute_from_chunk(chunk:bytes) -> Attribute:
  'Recreate an `Attribute` from its precomputed chunk; used by pickle and copy.'
  a = object.__new__(Attribute)
  object.__setattr__(a, 'chunk', chunk)
  return a


class Html:
  '''
  Abstract base of the immutable markup fragment hierarchy.
  Fragments combine with `+` (siblings), take attributes with `@`, and render with `render`.
  '''

  __slots__ = ()

  def __setattr__(self, name:str, val:Any) -> None: raise AttributeError(f'{type(self).__name__} is immutable')

  def __add__(self, other:'Html') -> 'Html':
    if not isinstance(other, Html): return NotImplemented
    if isinstance(other, Empty): return self
    if isinstance(self, Empty): return other
    return Seq((self, other))

  def __matmul__(self, attr:Attribute) -> 'Html':
    if not isinstance(attr, Attribute): return NotImplemented
    return self.with_attr(attr)

  def __bytes__(self) -> bytes: return render_html(self)

  def with_attr(self, attr:Attribute) -> 'Html':
    'Return a fragment that renders `attr` inside the opening tag of this fragment.'
    return attr(self)

  def render(self) -> bytes:
    'Render the fragment to bytes.'
    return render_html(self)

  def render_str(self) -> str:
    'Render the fragment to a string.'
    return render_html(self).decode('utf-8')

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    '''
    Render this node given its pending attribute chunks.
    Chunks that are ready are appended to `builder`;
    work that must follow is pushed onto `stack` in reverse order.
    '''
    raise NotImplementedError(type(self))


class Empty(Html):
  'The empty fragment; renders nothing. This is the identity for `+`.'

  __slots__ = ()

  def __repr__(self) -> str: return 'empty'

  def __reduce__(self) -> str: return 'empty' # Pickle and copy preserve the singleton.

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None: pass


empty = Empty()


class Content(Html):
  'Precomputed content bytes. Content has no opening tag, so any pending attributes are dropped.'

  __slots__ = ('chunk',)

  chunk:bytes

  def __init__(self, chunk:bytes) -> None:
    object.__setattr__(self, 'chunk', chunk)

  def __repr__(self) -> str: return f'Content({repr_chunk(self.chunk)})'

  def __reduce__(self) -> tuple: return (Content, (self.chunk,))

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    builder.append_raw(self.chunk)


class Parent(Html):
  'An element with content: `begin`, attributes, `>`, the inner fragment, `end`.'

  __slots__ = ('begin', 'end', 'inner')

  begin:Tag
  end:Tag
  inner:Html

  def __init__(self, begin:Tag, end:Tag, inner:Html) -> None:
    object.__setattr__(self, 'begin', begin)
    object.__setattr__(self, 'end', end)
    object.__setattr__(self, 'inner', inner)

  def __repr__(self) -> str: return f'Parent({repr_chunk(self.begin.chunk)}, {self.inner!r})'

  def __reduce__(self) -> tuple: return (Parent, (self.begin, self.end, self.inner))

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    builder.append_raw(self.begin.chunk)
    _write_attrs(attrs, builder)
    builder.append_ascii_char('>')
    stack.append(self.end.chunk)
    stack.append((self.inner, _no_attrs)) # The inner fragment never sees this element's attributes.


class Leaf(Html):
  'A self-closing element: `begin`, attributes, ` />`.'

  __slots__ = ('begin',)

  begin:Tag

  def __init__(self, begin:Tag) -> None:
    object.__setattr__(self, 'begin', begin)

  def __repr__(self) -> str: return f'Leaf({repr_chunk(self.begin.chunk)})'

  def __reduce__(self) -> tuple: return (Leaf, (self.begin,))

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    builder.append_raw(self.begin.chunk)
    _write_attrs(attrs, builder)
    builder.append_raw(b' />')


class Open(Html):
  'An unclosed element, as used for HTML 4 void elements such as `<br>`: `begin`, attributes, `>`.'

  __slots__ = ('begin',)

  begin:Tag

  def __init__(self, begin:Tag) -> None:
    object.__setattr__(self, 'begin', begin)

  def __repr__(self) -> str: return f'Open({repr_chunk(self.begin.chunk)})'

  def __reduce__(self) -> tuple: return (Open, (self.begin,))

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    builder.append_raw(self.begin.chunk)
    _write_attrs(attrs, builder)
    builder.append_ascii_char('>')


class Seq(Html):
  'A sequence of sibling fragments. Each item renders with no pending attributes.'

  __slots__ = ('items',)

  items:Tuple[Html,...]

  def __init__(self, items:Tuple[Html,...]) -> None:
    object.__setattr__(self, 'items', items)

  def __repr__(self) -> str: return f'Seq{self.items!r}'

  def __reduce__(self) -> tuple: return (Seq, (self.items,))

  def __iter__(self) -> Iterator[Html]: return iter(self.items)

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    stack.extend((item, _no_attrs) for item in reversed(self.items))


class Attributed(Html):
  '''
  A fragment with one more attribute applied.
  The attribute's chunk is linked in front of the chunks pending from outer wrappers.
  Outer wrappers were applied later, and their chunks are written first.
  '''

  __slots__ = ('inner', 'attr')

  inner:Html
  attr:Attribute

  def __init__(self, inner:Html, attr:Attribute) -> None:
    object.__setattr__(self, 'inner', inner)
    object.__setattr__(self, 'attr', attr)

  def __repr__(self) -> str: return f'{self.inner!r} @ {self.attr!r}'

  def __reduce__(self) -> tuple: return (Attributed, (self.inner, self.attr))

  def _expand(self, attrs:AttrChunks, builder:Builder, stack:List[_WorkItem]) -> None:
    stack.append((self.inner, (self.attr.chunk, attrs)))


class Element:
  '''
  A content constructor: an element that still awaits its inner content.
  Call it with a fragment to obtain a `Parent`.
  Attributes applied with `@` are deferred until the content is supplied;
  the same `Element` can be called any number of times with different content.
  '''

  __slots__ = ('begin', 'end', 'attrs')

  begin:Tag
  end:Tag
  attrs:Tuple[Attribute,...] # In order of application.

  def __init__(self, begin:Tag, end:Tag, attrs:Tuple[Attribute,...]=()) -> None:
    if not isinstance(begin, Tag): raise FragmentTypeError('`Tag` for element begin', begin)
    if not isinstance(end, Tag): raise FragmentTypeError('`Tag` for element end', end)
    object.__setattr__(self, 'begin', begin)
    object.__setattr__(self, 'end', end)
    object.__setattr__(self, 'attrs', attrs)

  def __repr__(self) -> str:
    attrs = ''.join(f' @ {a!r}' for a in self.attrs)
    return f'Element({repr_chunk(self.begin.chunk)}){attrs}'

  def __setattr__(self, name:str, val:Any) -> None: raise AttributeError('Element is immutable')

  def __reduce__(self) -> tuple: return (Element, (self.begin, self.end, self.attrs))

  def __call__(self, inner:Html) -> Html:
    if not isinstance(inner, Html): raise FragmentTypeError('`Html` fragment as element content', inner)
    h:Html = Parent(self.begin, self.end, inner)
    for attr in self.attrs: h = attr(h)
    return h

  def __matmul__(self, attr:Attribute) -> 'Element':
    if not isinstance(attr, Attribute): return NotImplemented
    return self.with_attr(attr)

  def with_attr(self, attr:Attribute) -> 'Element':
    'Return a constructor that applies `attr` to the element it produces.'
    return Element(self.begin, self.end, self.attrs + (attr,))


# Tags.

def text_tag(text:str) -> Tag:
  'Create a `Tag` from text. This is only needed to create custom element or attribute combinators.'
  if not isinstance(text, str): raise FragmentTypeError('`str` tag text', text)
  return Tag(text)

string_tag = text_tag


def open_tag(name:str) -> Tag:
  'The start of an opening tag, e.g. `<p`; attributes and `>` follow it.'
  return text_tag('<' + name)


def close_tag(name:str) -> Tag:
  'A complete closing tag, e.g. `</p>`.'
  return text_tag(f'</{name}>')


def attr_key(name:str) -> Tag:
  'The key part of an attribute, e.g. ` src="`.'
  return text_tag(f' {name}="')


# Attribute values.

def text_value(text:str) -> AttributeValue:
  'Create an attribute value from text, escaping it.'
  if not isinstance(text, str): raise FragmentTypeError('`str` attribute value', text)
  return AttributeValue(escape_to_bytes(text))

string_value = text_value


def pre_escaped_text_value(text:str) -> AttributeValue:
  'Create an attribute value from text that is already escaped. The text is not checked.'
  if not isinstance(text, str): raise FragmentTypeError('`str` attribute value', text)
  return AttributeValue(encode_text(text))

pre_escaped_string_value = pre_escaped_text_value


# Attributes.

def attribute(key:Tag, value:AttributeValue) -> Attribute:
  'Create an attribute from a key chunk (see `attr_key`) and a value.'
  return Attribute(key, value)


_data_prefix = Tag(' data-')
_key_suffix = Tag('="')

def data_attribute(name:Tag, value:AttributeValue) -> Attribute:
  'Create an HTML5 custom data attribute: `data_attribute(text_tag("foo"), text_value("bar"))` renders ` data-foo="bar"`.'
  return Attribute(_data_prefix + name + _key_suffix, value)


def attr(name:str, value:str) -> Attribute:
  'Shorthand for `attribute(attr_key(name), text_value(value))`.'
  return Attribute(attr_key(name), text_value(value))


@overload
def apply_attribute(target:Html, attr:Attribute) -> Html: ...

@overload
def apply_attribute(target:Element, attr:Attribute) -> Element: ...

def apply_attribute(target, attr):
  '''
  Apply `attr` to either a fragment or an element constructor that still awaits content.
  Equivalent to `target @ attr`.
  '''
  if not isinstance(attr, Attribute): raise FragmentTypeError('`Attribute`', attr)
  if isinstance(target, (Html, Element)): return target.with_attr(attr)
  raise FragmentTypeError('`Html` fragment or `Element`', target)


# Elements.

def parent(begin:Tag, end:Tag) -> Element:
  'Create a parent element constructor from an opening tag start and a closing tag.'
  return Element(begin, end)


def leaf(begin:Tag) -> Html:
  'Create a self-closing element, e.g. `<img />`.'
  if not isinstance(begin, Tag): raise FragmentTypeError('`Tag` for leaf begin', begin)
  return Leaf(begin)


def open(begin:Tag) -> Html:
  'Create an unclosed element, e.g. `<br>`.'
  if not isinstance(begin, Tag): raise FragmentTypeError('`Tag` for open begin', begin)
  return Open(begin)


# Content.

def text(text:str) -> Html:
  'Create a fragment from text, escaping it.'
  if not isinstance(text, str): raise FragmentTypeError('`str` text', text)
  return Content(escape_to_bytes(text))

string = text


def pre_escaped_text(text:str) -> Html:
  'Create a fragment from text without escaping it.'
  if not isinstance(text, str): raise FragmentTypeError('`str` text', text)
  return Content(encode_text(text))

pre_escaped_string = pre_escaped_text


def show_html(obj:Any) -> Html:
  'Create a fragment from the escaped `repr` of `obj`.'
  return Content(escape_to_bytes(repr(obj)))


def pre_escaped_show_html(obj:Any) -> Html:
  'Create a fragment from the `repr` of `obj`, without escaping.'
  return Content(encode_text(repr(obj)))


def unsafe_bytes(chunk:bytes) -> Html:
  '''
  Insert bytes directly into the output. This is unsafe:
  * the bytes might not be valid UTF-8;
  * the bytes might contain unescaped markup characters.
  '''
  if not isinstance(chunk, bytes): raise FragmentTypeError('`bytes`', chunk)
  return Content(chunk)


# Sequencing.

def concat(*items:Html) -> Html:
  'Combine fragments as siblings, in order.'
  return concat_iter(items)


def concat_iter(items:Iterable[Html]) -> Html:
  'Combine an iterable of fragments as siblings, in order.'
  seq:List[Html] = []
  for item in items:
    if not isinstance(item, Html): raise FragmentTypeError('`Html` fragment', item)
    if isinstance(item, Empty): continue
    seq.append(item)
  if not seq: return empty
  if len(seq) == 1: return seq[0]
  return Seq(tuple(seq))


# Rendering.

def render_html(html:Html) -> bytes:
  '''
  Render `html` to bytes, in time linear in the size of the output.
  The fragment starts with no pending attributes.
  Rendering uses an explicit work stack rather than recursion, so nesting depth is not limited by the interpreter stack.
  '''
  if not isinstance(html, Html): raise FragmentTypeError('`Html` fragment', html)
  builder = Builder()
  stack:List[_WorkItem] = [(html, _no_attrs)]
  pop = stack.pop
  append_raw = builder.append_raw
  while stack:
    item = pop()
    if isinstance(item, bytes):
      append_raw(item)
    else:
      node, attrs = item
      node._expand(attrs, builder, stack)
  return builder.flush()

