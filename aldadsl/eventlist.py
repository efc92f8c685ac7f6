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
The :class:`EventList` mixin, that gives a class the ability to hold events
and to append them using builder calls.

Any attribute of an event list that is not really defined is a builder call::

    >>> from aldadsl import Score
    >>> Score(lambda s: (s.piano_(), s.o4(), s.c8(), s.d(), s.e())).render()
    'piano: o4 c8 d e'

The name of the call decides which event is created; see
:mod:`~aldadsl.dispatch` for the rules. Names that are not valid Python
identifiers can be used with :meth:`EventList.call`.

A builder block is a callable, given as the last argument, that is called with
the event list to build as its only argument.

"""

import logging

from . import codec
from .datatypes import RenderContext
from .node import Node, values_equal


log = logging.getLogger(__name__)


# instance attributes that must never be taken for builder calls
_ATTRIBUTES = frozenset((
    '_parent', '_container', '_event', 'events', 'variables', 'block', 'arguments',
))


class EventList:
    """Mixin class for nodes that hold a list of events.

    ``events`` is the list of events, in notation order. ``variables`` is
    the set of variable names declared in this list. The ``block`` is called
    by :meth:`on_contained`, not in the constructor; a :class:`.score.Score`
    calls it immediately.

    The ``arguments`` are events given to a builder call as arguments instead
    of being built in the block. They were appended to the calling event list
    first, and are detached from it in :meth:`on_contained`.

    """
    def __init__(self, *events, block=None):
        super().__init__()
        self.events = []
        self.variables = set()
        self.block = block
        self.arguments = ()
        for event in events:
            self.adopt(event)
            self.events.append(event)

    def __getattr__(self, name):
        if name in _ATTRIBUTES or (name.startswith('__') and name.endswith('__')):
            raise AttributeError(name)
        for ancestor in self.ancestors():
            if hasattr(type(ancestor), name):
                return getattr(ancestor, name)
        def builder_call(*args):
            return self.call(name, *args)
        builder_call.__name__ = name
        return builder_call

    def call(self, name, *args):
        """Perform the builder call ``name``, return the created container.

        If the last argument is callable, it is used as the block of the new
        event. Raises :class:`~.error.UnhandledCallError` if the name matches
        none of the builder rules.

        """
        from . import dispatch
        block = None
        if args and callable(args[-1]) and not isinstance(args[-1], Node):
            block, args = args[-1], args[:-1]
        return dispatch.Builder(self, name, args, block).build()

    def take_arguments(self, arguments):
        """Put the arguments of a builder call in our events.

        They stay in the calling event list until :meth:`on_contained` detaches
        them.

        """
        self.arguments = tuple(arguments)
        self.events.extend(self.arguments)

    def adopt(self, event):
        """Make ourselves the parent of the event (that will be in our events).

        The event loses its container link, because it is not wrapped any
        more; a container keeps the event it wraps.

        """
        if isinstance(event, Node):
            event.set_parent(self)
            event.container = None

    def build(self, block):
        """Call block with ourselves as argument, return ourselves."""
        block(self)
        return self

    def on_contained(self):
        """Run the block, then detach the arguments and take them over."""
        if self.block:
            self.build(self.block)
        if self.arguments:
            log.debug("detaching %d argument(s) of %r", len(self.arguments), self)
            codec.detach(self.arguments)
            for event in self.arguments:
                self.adopt(event)
            self.arguments = ()

    def has_variable(self, name):
        """Return True if a variable ``name`` is declared here or in an ancestor."""
        if name in self.variables:
            return True
        parent = self.parent
        return parent is not None and parent.has_variable(name)

    def import_events(self, event_list):
        """Append copies of the events of another event list.

        Alda can't import scores from other files, this is the remedy. The
        other event list is left untouched.

        """
        for event in event_list.events:
            event = event.copy() if isinstance(event, Node) else event
            self.adopt(event)
            self.events.append(event)

    def events_code(self, delimiter=' ', context=None):
        """Return the code of all events, joined with delimiter."""
        if context is None:
            context = RenderContext()
        return delimiter.join(codec.write(event, context) for event in self.events)

    def children(self):
        """Return the events that are nodes."""
        return tuple(e for e in self.events if isinstance(e, Node))

    def body_equals(self, other):
        return self.variables == other.variables and \
            values_equal(self.events, other.events)

    def relink(self):
        self.block = None
        for event in self.events:
            self.adopt(event)
