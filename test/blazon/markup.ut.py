# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from html import unescape

from blazon.markup import (attr, attr_key, attribute, AttributeValue, close_tag, empty, leaf, open, open_tag, parent,
  pre_escaped_show_html, pre_escaped_string, pre_escaped_string_value, pre_escaped_text, pre_escaped_text_value, render_html,
  show_html, string, string_tag, string_value, Tag, text, text_tag, text_value, unsafe_bytes)
from utest import utest, utest_exc, utest_repr, utest_val


img = open_tag('img')
br = open_tag('br')
p = parent(open_tag('p'), close_tag('p'))


# Tags.

utest(Tag(b'<p'), open_tag, 'p')
utest(Tag('</p>'), close_tag, 'p')
utest(Tag(' src="'), attr_key, 'src')
utest(Tag('<a'), lambda: Tag('<') + Tag('a'))
utest(Tag('x'), string_tag, 'x')
utest(b'<\xc3\xa9', lambda: text_tag('<é').chunk)
utest(b'<&', lambda: text_tag('<&').chunk) # Tags are never escaped.
utest_repr("Tag('<p')", open_tag, 'p')
utest_exc(AttributeError, setattr, img, 'chunk', b'<x')
utest_val(1, len({open_tag('p'), open_tag('p')}), 'equal tags hash equal')


# Attribute values.

utest(b'a &amp; b', lambda: text_value('a & b').chunk)
utest(AttributeValue(b'ab'), lambda: text_value('a') + text_value('b'))
utest_repr("AttributeValue('x')", text_value, 'x')

# Pre-escaped values are trusted and not escaped again.
utest(b'a &amp; <b>', lambda: pre_escaped_text_value('a &amp; <b>').chunk)
utest(b'<img title="a &amp; <b>" />', render_html, leaf(img) @ attribute(attr_key('title'), pre_escaped_text_value('a &amp; <b>')))
utest(text_value('a & "b"'), string_value, 'a & "b"')
utest(pre_escaped_text_value('a &amp; <b>'), pre_escaped_string_value, 'a &amp; <b>')


# Leaf elements and attributes.

utest(b'<img src="a.png" />', render_html, leaf(img) @ attribute(attr_key('src'), text_value('a.png')))
utest(b'<img />', render_html, leaf(img))
utest(b'<br>', render_html, open(br))
utest(b'<br class="x">', render_html, open(br) @ attr('class', 'x'))

# Chained attributes are emitted in reverse order of application.
utest(b'<img href="b" src="a" />', render_html, leaf(img) @ attr('src', 'a') @ attr('href', 'b'))
utest(b'<img c="3" b="2" a="1" />', render_html, leaf(img) @ attr('a', '1') @ attr('b', '2') @ attr('c', '3'))

# Calling an attribute applies it.
utest(b'<img alt="x" />', render_html, attr('alt', 'x')(leaf(img)))

# Attribute values are escaped.
utest(b'<img title="a &quot;b&quot; &amp; &lt;c&gt;" />', render_html, leaf(img) @ attr('title', 'a "b" & <c>'))


# Parent elements.

utest(b'<p>5 &lt; 3</p>', render_html, p(text('5 < 3')))
utest(b'<p></p>', render_html, p(empty))

# Attributes land in the tag of the element they were applied to.
utest(b'<p><img src="x" /></p>', render_html, p(leaf(img) @ attr('src', 'x')))
utest(b'<p class="c"><img src="x" /></p>', render_html, (p @ attr('class', 'c'))(leaf(img) @ attr('src', 'x')))
utest(b'<p class="c"><p>inner</p></p>', render_html, p(p(text('inner'))) @ attr('class', 'c'))

# Attributes applied to the constructor are deferred until content is supplied.
utest(b'<p class="b" id="a">t</p>', render_html, (p @ attr('id', 'a') @ attr('class', 'b'))(text('t')))
utest(b'<p class="b" id="a">t</p>', render_html, (p @ attr('id', 'a'))(text('t')) @ attr('class', 'b'))

note = p @ attr('class', 'note')
utest(b'<p class="note">a</p><p class="note">b</p>', render_html, note(text('a')) + note(text('b')))
utest(b'<p>plain</p>', render_html, p(text('plain'))) # Applying to `note` did not alter `p`.


# Content.

utest(b'&lt;b&gt; &amp; &quot;q&quot;', render_html, text('<b> & "q"'))
utest(b'&lt;b&gt;', render_html, string('<b>'))
utest(b'<b>', render_html, pre_escaped_text('<b>'))
utest(b'<b>', render_html, pre_escaped_string('<b>'))
utest(b'<b>', render_html, unsafe_bytes(b'<b>'))
utest(b'\xff', render_html, unsafe_bytes(b'\xff')) # Not validated.
utest(b'5', render_html, show_html(5))
utest(b'&#x27;&lt;x&gt;&#x27;', render_html, show_html('<x>'))
utest(b"[1, '<']", render_html, pre_escaped_show_html([1, '<']))
utest(b'caf\xc3\xa9', render_html, text('café'))
utest(b'?', render_html, text('\ud800'))

# Content has no opening tag, so attributes applied to it are dropped.
utest(b'x', render_html, text('x') @ attr('a', 'b'))
utest(b'', render_html, empty @ attr('a', 'b'))


# Escaping round trip.

for s in ['5 < 3', 'a && b', '<script>alert("x")</script>', "it's > that", '']:
  out = p(text(s)).render_str()
  utest_val(f'<p>{s}</p>', unescape(out), f'unescape round trip: {s!r}')
  inner = out[len('<p>'):-len('</p>')]
  utest_val(False, '<' in inner or '>' in inner, f'no raw angle brackets: {s!r}')


# Rendering.

doc = (p @ attr('id', 'doc'))(text('Hello ') + leaf(img) @ attr('src', 'a.png') + open(br))
utest_val(render_html(doc), render_html(doc), 'render is repeatable')
utest_val(render_html(doc), bytes(doc), '__bytes__')
utest_val(render_html(doc), doc.render(), 'Html.render')
utest('<p id="doc">Hello <img src="a.png" /><br></p>', doc.render_str)

# A shared tag renders identically in every use.
utest(b'<img /><img /><img />', render_html, leaf(img) + leaf(img) + leaf(img))
