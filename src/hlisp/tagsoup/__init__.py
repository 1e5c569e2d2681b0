"""
Tag-Soup Package.

Lenient HTML parsing into an element tree, conversion between that tree and
form forests, and HTML emission.
"""

from hlisp.tagsoup.convert import forms_to_html, forms_to_soup, pedanticize, render_html, soup_to_forms
from hlisp.tagsoup.nodes import SoupComment, SoupElement, SoupNode, SoupText
from hlisp.tagsoup.parser import parse_string

__all__ = [
  "SoupComment",
  "SoupElement",
  "SoupNode",
  "SoupText",
  "forms_to_html",
  "forms_to_soup",
  "parse_string",
  "pedanticize",
  "render_html",
  "soup_to_forms",
]
