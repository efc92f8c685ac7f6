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
The rules that turn builder calls into events.

A builder call has a name, positional arguments and an optional block. The
name is matched against the following rules; the first rule that matches
decides what event is created:

 1. ``name__`` (two lowercase letters or more, two trailing underscores):
    set a variable, see :class:`~.event.SetVariable`.

 2. ``name_`` (two lowercase letters or more, trailing underscore): a part,
    see :class:`~.event.Part`. A string argument is the nickname.

 3. two lowercase letters or more: set a variable, get a variable or an
    inline Lisp call. A block, or (if the variable is not yet declared) one
    event argument that is not an inline call or identifier sets a variable;
    a declared variable with no arguments or one event argument gets it;
    everything else is an :class:`~.event.InlineCall`.

 4. ``t<duration>``: a :class:`~.event.Cram`; a block is required.

 5. ``a`` ... ``g``, followed by a duration: a :class:`~.event.Note`.

 6. ``r<duration>``: a :class:`~.event.Rest`.

 7. ``x``: a :class:`~.event.Chord`.

 8. ``s``: a :class:`~.event.Sequence`.

 9. ``o!``, ``o?``, ``o<number>``: an :class:`~.event.Octave` change.

10. ``v<number>``: a :class:`~.event.Voice`.

11. ``__name``: an :class:`~.event.AtMarker`.

12. ``_name_``: an :class:`~.event.Identifier`.

13. ``_name``: a :class:`~.event.Marker`.

If no rule matches, :class:`~.error.UnhandledCallError` is raised.

Notes, rests, parts, octaves, voices, markers, identifiers and variable
references support the *sequence sugar*: if they get exactly one argument,
which must be the event that was created just before, that event is detached
and joined with the new event in a :class:`~.event.Sequence`. So ``c(d(e))``
gives ``[c d e]``.

The new event is wrapped in a :class:`~.event.Container` that is appended to
the event list and returned.

"""

import logging
import re
import warnings

from parce.util import Dispatcher, caching_dict

from . import generation
from .error import UnhandledCallError
from .event import (
    AtMarker, Chord, Container, Cram, GetVariable, Identifier, InlineCall,
    Marker, Note, Octave, Part, Rest, Sequence, SetVariable, Voice,
)
from .node import Node


log = logging.getLogger(__name__)


#: the ordered rules: (regular expression, rule name)
RULES = tuple((re.compile(pattern), rule) for pattern, rule in (
    (r'([a-z][a-z].*)__', 'set_variable'),
    (r'([a-z][a-z].*)_', 'part'),
    (r'[a-z][a-z].*', 'lisp_or_variable'),
    (r't(.*)', 'cram'),
    (r'([a-g])(.*)', 'note'),
    (r'r(.*)', 'rest'),
    (r'x', 'chord'),
    (r's', 'sequence'),
    (r'o!', 'octave_up'),
    (r'o\?', 'octave_down'),
    (r'o(\d*)', 'octave'),
    (r'v(\d+)', 'voice'),
    (r'__(.+)', 'at_marker'),
    (r'_(.+)_', 'identifier'),
    (r'_(.+)', 'marker'),
))


def classify(name):
    """Return a tuple (rule, groups) for the first rule matching name.

    Returns None if no rule matches.

    """
    for regex, rule in RULES:
        m = regex.fullmatch(name)
        if m:
            return rule, m.groups()


#: caches the classification of names, which only depends on the name
classified = caching_dict(classify)


class Builder:
    """Builds the event for one builder call on an event list.

    Use :meth:`build`, which creates the event, wraps it in a container,
    appends the container to the event list and returns it.

    """
    def __init__(self, event_list, name, args=(), block=None):
        self.event_list = event_list
        self.name = name
        self.args = tuple(args)
        self.block = block

    def build(self):
        """Create the event and return its container."""
        found = classified[self.name]
        if found is None:
            raise UnhandledCallError(self.name)
        rule, groups = found
        event = self._build(rule, *groups)
        log.debug("%s%r -> %s", self.name, self.args, rule)
        container = Container(event, self.event_list)
        self.event_list.events.append(container)
        return container

    def sequence_sugar(self, event):
        """Join the event with the single argument, if there is one.

        The argument must be the event that was appended last; it is detached.

        """
        if len(self.args) != 1:
            return event
        arg = self.args[0]
        if not isinstance(arg, Node):
            raise TypeError("{} can't be followed by {}".format(self.name, repr(arg)))
        arg.detach()
        return Sequence.join(event, arg)

    _build = Dispatcher()

    @_build('set_variable')
    def set_variable(self, name):
        return SetVariable(name, *self.args, block=self.block)

    @_build('part')
    def part(self, name):
        if self.args and isinstance(self.args[0], str):
            return Part([name], self.args[0])
        if self.args and generation.is_v2():
            warnings.warn('parts in sequence not allowed in v2', stacklevel=2)
        return self.sequence_sugar(Part([name]))

    @_build('lisp_or_variable')
    def lisp_or_variable(self):
        name, args = self.name, self.args
        declared = self.event_list.has_variable(name)
        single_event = len(args) == 1 and isinstance(args[0], Node)
        if self.block or (not declared and single_event
                          and not args[0].is_event_of((InlineCall, Identifier))):
            return SetVariable(name, *args, block=self.block)
        elif declared and (not args or single_event):
            return self.sequence_sugar(GetVariable(name))
        return InlineCall(name, *args)

    @_build('cram')
    def cram(self, duration):
        if self.block is None:
            raise TypeError("a cram needs a block: {}".format(self.name))
        return Cram(duration, block=self.block)

    @_build('note')
    def note(self, pitch, duration):
        return self.sequence_sugar(Note(pitch, duration))

    @_build('rest')
    def rest(self, duration):
        return self.sequence_sugar(Rest(duration))

    @_build('chord')
    def chord(self):
        chord = Chord(block=self.block)
        chord.take_arguments(self.args)
        return chord

    @_build('sequence')
    def sequence(self):
        sequence = Sequence(block=self.block)
        sequence.take_arguments(self.args)
        return sequence

    @_build('octave_up')
    def octave_up(self):
        return self.sequence_sugar(Octave('', 1))

    @_build('octave_down')
    def octave_down(self):
        return self.sequence_sugar(Octave('', -1))

    @_build('octave')
    def octave(self, num):
        return self.sequence_sugar(Octave(num))

    @_build('voice')
    def voice(self, num):
        return self.sequence_sugar(Voice(num))

    @_build('at_marker')
    def at_marker(self, name):
        return self.sequence_sugar(AtMarker(name))

    @_build('identifier')
    def identifier(self, name):
        return self.sequence_sugar(Identifier(name))

    @_build('marker')
    def marker(self, name):
        return self.sequence_sugar(Marker(name))
