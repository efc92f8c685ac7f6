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
This module defines the :class:`Node` class, the base of all events.

A Node knows two other nodes, but never owns them: its :attr:`~Node.parent`
(the event list whose ``events`` contain the node, directly or via a
container) and its :attr:`~Node.container` (the container wrapping the node,
if any). Both are weak references, so an event tree does not contain
circular references. (This also means that you need to keep a reference to a
tree's root node, the score, otherwise it will be garbage collected.)

Child nodes are yielded by :meth:`~Node.children`; a plain event has none, a
container has exactly one and an event list has its events.

"""

import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node:
    """Base class for everything that can live in an event tree.

    Comparing nodes with ``==`` compares identity, which keeps ``list.index``
    and ``list.remove`` on event lists robust. Use :meth:`equals` to compare
    nodes structurally.

    """

    def __init__(self):
        self._parent = _NO_PARENT
        self._container = _NO_PARENT

    def __bool__(self):
        """Always True."""
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare."""
        return self is other

    def __ne__(self, other):
        """Identity compare."""
        return self is not other

    @property
    def parent(self):
        """The owning event list or None; uses a weak reference."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _NO_PARENT

    @property
    def container(self):
        """The container wrapping this node or None; uses a weak reference."""
        return self._container()

    @container.setter
    def container(self, node):
        self._container = _NO_PARENT if node is None else weakref.ref(node)

    @container.deleter
    def container(self):
        self._container = _NO_PARENT

    def children(self):
        """Return the child nodes. The default implementation returns ()."""
        return ()

    def root(self):
        """Return the root node."""
        root = self
        for root in self.ancestors():
            pass
        return root

    def ancestors(self):
        """Yield the parent, then the parent's parent, etcetera."""
        n = self.parent
        while n:
            yield n
            n = n.parent

    def topmost_container(self):
        """Return the outermost container wrapping this node.

        Follows the :attr:`container` links upward. Returns the node itself
        if it is not contained.

        """
        node = self
        while node.container is not None:
            node = node.container
        return node

    def descendants(self):
        """Iterate over all the descendants of this node, in document order."""
        stack = []
        gen = iter(self.children())
        while True:
            for n in gen:
                yield n
                stack.append(gen)
                gen = iter(n.children())
                break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def instances_of(self, cls):
        """Yield all descendants that are an instance of ``cls``."""
        return (n for n in self.descendants() if isinstance(n, cls))

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class,
        :meth:`body_equals` returns True, and the children are equivalent as
        well. The ``parent`` and ``container`` references are never compared.

        """
        if type(self) is not type(other) or not self.body_equals(other):
            return False
        children, other_children = self.children(), other.children()
        return len(children) == len(other_children) and \
            all(a.equals(b) for a, b in zip(children, other_children))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def copy(self):
        """Return a copy of this node, without parent or container.

        All attributes are copied using :func:`copy_value`, so child nodes are
        copied as well.

        """
        node = object.__new__(type(self))
        Node.__init__(node)
        for name, value in vars(self).items():
            if name not in ("_parent", "_container"):
                node.__dict__[name] = copy_value(value)
        node.relink()
        return node

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        self._dump(file, d, "", None)

    def _dump(self, file, d, indent, last):
        """Print ourselves with the indent prefix and recurse."""
        if last is None:
            prefix, child_indent = "", ""
        else:
            prefix = indent + d[3 if last else 2]
            child_indent = indent + d[1 if last else 0]
        print(prefix + repr(self), file=file)
        children = self.children()
        for i, n in enumerate(children):
            n._dump(file, d, child_indent, i == len(children) - 1)

    def relink(self):
        """Restore the back-references of the children of a fresh copy.

        Called by :meth:`copy`. The default implementation does nothing.

        """


def copy_value(value):
    """Copy a value that is stored in a node.

    Nodes are copied using :meth:`Node.copy`, lists, tuples, dicts and sets
    are copied with their contents; other values are returned unchanged.

    """
    if isinstance(value, Node):
        return value.copy()
    elif isinstance(value, list):
        return [copy_value(v) for v in value]
    elif isinstance(value, tuple):
        return tuple(copy_value(v) for v in value)
    elif isinstance(value, dict):
        return {copy_value(k): copy_value(v) for k, v in value.items()}
    elif isinstance(value, set):
        return set(value)
    return value


def values_equal(a, b):
    """Return True if a and b are equivalent.

    Nodes are compared using :meth:`Node.equals`, collections element-wise,
    other values using ``==`` (but only if they have the same type).

    """
    if isinstance(a, Node):
        return a.equals(b)
    elif isinstance(a, (list, tuple)):
        return type(a) is type(b) and len(a) == len(b) and \
            all(values_equal(x, y) for x, y in zip(a, b))
    elif isinstance(a, dict):
        return type(a) is type(b) and list(a) == list(b) and \
            all(values_equal(a[k], b[k]) for k in a)
    return type(a) is type(b) and a == b
