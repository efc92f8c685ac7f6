# -*- coding: utf-8 -*-
#
# This file is part of `aldadsl`, a builder for Alda music notation
#
# Copyright © 2026 by the aldadsl developers
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.



"""
Writing plain Python values as notation tokens.

Arguments of inline Lisp calls, repetition labels and repetition counts can
be plain Python values. This module converts them to text::

    >>> from aldadsl.codec import write, sym
    >>> from aldadsl.datatypes import RenderContext
    >>> write([sym('d'), sym('major')], RenderContext('v1'))
    '[:d :major]'
    >>> write([sym('d'), sym('major')], RenderContext('v2'))
    "'(d major)"
    >>> write(range(4, 7), RenderContext())
    '4-6'

Events (:class:`~.node.Node` instances) write themselves.

"""

import re

from parce.util import Dispatcher

from .node import Node


class Symbol(str):
    """A symbol, written as ``:name`` in Alda 1 and ``'name`` in Alda 2."""
    def __repr__(self):
        return "sym({})".format(str.__repr__(self))


def sym(name):
    """Return a :class:`Symbol` for name."""
    return Symbol(name)


_escapes = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\t': '\\t',
    '\r': '\\r',
}


def quote(text):
    """Return text as a double-quoted string literal."""
    return '"{}"'.format(re.sub(r'[\\"\n\t\r]', lambda m: _escapes[m.group()], text))


class Writer:
    """Writes values of the supported Python types.

    The method that writes a value is selected using the exact type of the
    value. Values of subclasses of supported types are written as their
    nearest supported base type.

    """

    #: supported types, in the order the nearest base type is searched
    types = (Symbol, bool, int, float, str, list, tuple, dict, range, type(None))

    @Dispatcher
    def _write(self, cls, value, context):
        """Called for a type that has no writer of its own."""
        for base in self.types:
            if isinstance(value, base):
                return self._write(base, value, context)
        raise TypeError("can't write value of type {}: {}".format(cls.__name__, repr(value)))

    def write(self, value, context):
        """Return the notation text for value."""
        if isinstance(value, Node):
            return value.write(context)
        return self._write(type(value), value, context)

    def write_elements(self, values, context):
        """Return the space-joined text of values, written as collection elements."""
        context = context.enter_collection()
        return ' '.join(self.write(v, context) for v in values)

    def write_collection(self, values, context):
        """Return the text of a collection, with its delimiters.

        Lists are ``[...]`` in Alda 1. In Alda 2 they are quoted Lisp lists,
        but the quote is only written on the outermost one.

        """
        contents = self.write_elements(values, context)
        if context.v1:
            return '[{}]'.format(contents)
        return '({})'.format(contents) if context.nested else "'({})".format(contents)

    @_write(Symbol)
    def write_symbol(self, value, context):
        if context.v1:
            return ':' + value
        return value if context.nested else "'" + value

    @_write(bool)
    def write_bool(self, value, context):
        return 'true' if value else 'false'

    @_write(type(None))
    def write_none(self, value, context):
        return 'nil'

    @_write(int)
    @_write(float)
    def write_number(self, value, context):
        return repr(value)

    @_write(str)
    def write_string(self, value, context):
        return quote(value)

    @_write(range)
    def write_range(self, value, context):
        if not value or value.step != 1:
            raise TypeError("can't write empty or stepped range: {}".format(repr(value)))
        return '{}-{}'.format(value.start, value.stop - 1)

    @_write(list)
    @_write(tuple)
    def write_list(self, value, context):
        return self.write_collection(value, context)

    @_write(dict)
    def write_dict(self, value, context):
        pairs = [v for item in value.items() for v in item]
        if context.v1:
            return '{{{}}}'.format(self.write_elements(pairs, context))
        return self.write_collection(pairs, context)


writer = Writer()


def write(value, context):
    """Return the notation text for value, see :meth:`Writer.write`."""
    return writer.write(value, context)


def detach(value):
    """Take value (or the events inside it) out of its event list.

    Events are detached using :meth:`.event.Event.detach`. The elements of
    lists and maps are detached in reverse order, so that the events that
    were created last are removed first. Other values are ignored.

    """
    if isinstance(value, Node):
        value.detach()
    elif isinstance(value, (list, tuple)):
        for v in reversed(value):
            detach(v)
    elif isinstance(value, dict):
        for k, v in reversed(list(value.items())):
            detach(v)
            detach(k)
