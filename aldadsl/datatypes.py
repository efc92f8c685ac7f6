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
Small datatypes used while rendering.
"""

from . import generation as _generation


class Properties:
    """A dictionary-like object that accesses keys as attributes.

    Adding another Properties object returns a new Properties instance
    with updated dict contents. Example::

        >>> from aldadsl.datatypes import Properties
        >>> p = Properties(nested=True)
        >>> p
        <Properties nested=True>
        >>> p.nested
        True
        >>> p + Properties(generation='v1')
        <Properties nested=True generation='v1'>

    Accessing a non-existent property name returns None. An empty Properties
    object evaluates to False.

    """
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)

    def __bool__(self):
        return bool(vars(self))

    def __repr__(self):
        def fields():
            yield type(self).__name__
            yield " ".join(("{}={}".format(
                name, repr(value)) for name, value in vars(self).items()))
        return "<{}>".format(" ".join(f for f in fields() if f))

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        return None

    def __eq__(self, other):
        if isinstance(other, Properties):
            return vars(self) == vars(other)
        return NotImplemented

    def __contains__(self, name):
        return name in self.__dict__

    def __add__(self, other):
        d = vars(self) | vars(other)
        return type(self)(**d)


class RenderContext(Properties):
    """The state that is threaded through a render.

    It carries the ``generation`` that is written and the ``nested`` flag,
    which is True while the elements of a list or map are written. A render
    context is never modified; use :meth:`enter_collection` to get the
    context for the elements of a collection.

    """
    def __init__(self, generation=None, nested=False, **kwargs):
        if generation is None:
            generation = _generation.get()
        super().__init__(
            generation=_generation.check(generation), nested=nested, **kwargs)

    @property
    def v1(self):
        """True if Alda 1 code is written."""
        return self.generation == _generation.V1

    @property
    def v2(self):
        """True if Alda 2 code is written."""
        return self.generation == _generation.V2

    def enter_collection(self):
        """Return the context for writing the elements of a list or map."""
        if self.nested:
            return self
        return self + Properties(nested=True)
