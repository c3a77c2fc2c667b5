# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Blazon is a combinator library for building escaped markup fragments and rendering them to bytes in linear time.
'''

from .builder import Builder
from .exceptions import FragmentTypeError
from .markup import (apply_attribute, attr, attr_key, Attribute, attribute, AttributeValue, close_tag, concat, concat_iter,
  data_attribute, Element, empty, Html, leaf, open, open_tag, parent, pre_escaped_show_html, pre_escaped_string,
  pre_escaped_string_value, pre_escaped_text, pre_escaped_text_value, render_html, show_html, string, string_tag,
  string_value, Tag, text, text_tag, text_value, unsafe_bytes)


# `open` and `string` are importable by name but excluded from star imports,
# where they would shadow the builtin `open` and the stdlib `string` module.
__all__ = [
  'apply_attribute', 'attr', 'attr_key', 'Attribute', 'attribute', 'AttributeValue', 'Builder', 'close_tag', 'concat',
  'concat_iter', 'data_attribute', 'Element', 'empty', 'FragmentTypeError', 'Html', 'leaf', 'open_tag', 'parent',
  'pre_escaped_show_html', 'pre_escaped_string', 'pre_escaped_string_value', 'pre_escaped_text', 'pre_escaped_text_value',
  'render_html', 'show_html', 'string_tag', 'string_value', 'Tag', 'text', 'text_tag', 'text_value', 'unsafe_bytes',
]
