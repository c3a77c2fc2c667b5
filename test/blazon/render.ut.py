# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from concurrent.futures import ThreadPoolExecutor

from blazon.markup import attr, close_tag, concat_iter, data_attribute, empty, Html, leaf, open_tag, parent, render_html, text, text_tag, text_value
from utest import utest, utest_val


div = parent(open_tag('div'), close_tag('div'))
img = open_tag('img')


# Deep nesting does not use the interpreter stack.
depth = 20000
deep:Html = text('x')
for _ in range(depth): deep = div(deep)
utest_val(b'<div>' * depth + b'x' + b'</div>' * depth, render_html(deep), 'deep nesting')

deep_attrs = leaf(img)
for i in range(depth): deep_attrs = deep_attrs @ attr('a', str(i))
utest_val(
  b'<img' + b''.join(b' a="%d"' % i for i in reversed(range(depth))) + b' />',
  render_html(deep_attrs),
  'long attribute chain')


# Data attributes.
utest(b'<div data-foo="bar">Hello.</div>', render_html,
  div(text('Hello.')) @ data_attribute(text_tag('foo'), text_value('bar')))


# Concurrent rendering of a shared fragment.
table = parent(open_tag('table'), close_tag('table'))
tr = parent(open_tag('tr'), close_tag('tr'))
td = parent(open_tag('td'), close_tag('td'))

big_table = (table @ attr('class', 'big'))(concat_iter(
  tr(concat_iter(td(text(str(c))) @ attr('data-row', str(r)) for c in range(10)))
  for r in range(100)))

expected = render_html(big_table)

with ThreadPoolExecutor(max_workers=8) as executor:
  results = list(executor.map(lambda _: render_html(big_table), range(32)))

utest_val(True, all(r == expected for r in results), 'concurrent renders are identical')
utest_val(True, expected.startswith(b'<table class="big"><tr><td data-row="0">0</td>'), 'big table prefix')
utest(b'', render_html, empty)
