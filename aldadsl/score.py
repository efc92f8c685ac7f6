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
The :class:`Score`, the top-level event list.
"""

from .datatypes import RenderContext
from .event import Container, InlineCall, RawText
from .eventlist import EventList
from .node import Node


class Score(EventList, Node):
    """A full Alda score.

    The block, if given, is called immediately with the score as argument::

        >>> def music(s):
        ...     s.call('tempo!', 108)   # inline lisp
        ...     s.piano_()              # piano part
        ...     s.o4()                  # octave 4
        ...     s.c8(); s.d(); s.e(); s.f()
        ...     s.g4(s.g(s.a(s.f(s.g(s.e(s.f(s.d(s.e(s.c())))))))))
        ...     s.d4_8()                # can't use '~', use '_' instead
        ...     s.o3(s.b8(s.o4(s.c2())))
        >>> Score(music).render('v1')
        '(tempo! 108) piano: o4 c8 d e f [g4 g a f g e f d e c] d4~8 [o3 b8 o4 c2]'

    More events can be added later using :meth:`~.eventlist.EventList.build`
    or by calling builder methods on the score directly.

    """
    def __init__(self, block=None):
        super().__init__(block=block)
        self.on_contained()

    def __repr__(self):
        c = "event" if len(self.events) == 1 else "events"
        return '<Score ({} {})>'.format(len(self.events), c)

    def __str__(self):
        return self.render()

    def render(self, generation=None):
        """Return the Alda code of the score.

        The ``generation`` (``'v1'`` or ``'v2'``) defaults to the current
        generation (see :mod:`~aldadsl.generation`).

        """
        return self.events_code(' ', RenderContext(generation))

    def clear(self):
        """Remove all events and variables."""
        self.events.clear()
        self.variables.clear()

    def raw(self, contents):
        """Append Alda code that is written unmodified, and return it.

        The :class:`~.event.RawText` event is not wrapped in a container::

            >>> Score(lambda s: s.raw('piano: c d e')).render()
            'piano: c d e'

        """
        event = RawText(contents)
        event.parent = self
        self.events.append(event)
        return event

    def l(self, head, *args):
        """Append an inline Lisp call with the specified head, and return its
        container.

        Use this when the function name can't be used as a builder call, e.g.
        ``f`` would be a note::

            >>> Score(lambda s: (s.piano_(), s.l('f'), s.c())).render()
            'piano: (f ) c'

        """
        container = Container(InlineCall(head, *args), self)
        self.events.append(container)
        return container
