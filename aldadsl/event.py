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
The events a score is built of.

Every event can write itself as Alda code using :meth:`Event.write`. Events
that are created by builder calls are wrapped in a :class:`Container`, that
adds a repetition count and alternative ending labels, and that implements
the operators::

    >>> from aldadsl import Score
    >>> Score(lambda s: (s.piano_(), s.c() / -s.e() / s.g())).render()
    'piano: c/e-/g'

"""

import logging

from . import codec
from .datatypes import RenderContext
from .error import OrderError
from .eventlist import EventList
from .node import Node, values_equal


log = logging.getLogger(__name__)


def snake_to_slug(name):
    """Convert a snake_case name to a slug-case name."""
    return str(name).replace('_', '-')


def slug_to_snake(name):
    """Convert a slug-case name to a snake_case name."""
    return str(name).replace('-', '_')


class Event(Node):
    """Base class for all events.

    The :attr:`~.node.Node.parent` of an event is the event list that
    contains it, possibly with a :class:`Container` in between.

    """
    def __repr__(self):
        cls = self.__class__
        mod = cls.__module__.split('.')[-1]
        head = self.repr_head()
        if head is None:
            return "<{}.{}>".format(mod, cls.__name__)
        return "<{}.{} {}>".format(mod, cls.__name__, head)

    def repr_head(self):
        """Return a representation for the repr. The default returns None."""
        return None

    def set_parent(self, parent):
        """Set the parent event list."""
        self.parent = parent

    def on_contained(self):
        """Called when a container starts wrapping this event.

        At this time the :attr:`~.node.Node.parent` and
        :attr:`~.node.Node.container` are already set.

        """

    def is_event_of(self, cls):
        """Return True if this event, or the event it wraps, is a cls instance."""
        return isinstance(self, cls)

    def write(self, context=None):
        """Return the Alda code for this event.

        The ``context`` is a :class:`~.datatypes.RenderContext`; if None, one
        is created for the current generation.

        """
        return self.write_event(RenderContext() if context is None else context)

    def write_event(self, context):
        """Implement this to return the Alda code. The default returns ''."""
        return ''

    def detach(self, except_parent_kinds=()):
        """Take our topmost container out of our parent's events.

        Only the last event of an event list can be detached; the last event
        is removed, and if it is not our topmost container (or ourselves, if
        not contained), :class:`~.error.OrderError` is raised.

        Nothing is done if we have no parent, or if the parent is an instance
        of one of the ``except_parent_kinds``.

        This is needed when an event is used as argument of another builder
        call (sequences, inline Lisp, variables), or as operand of the ``/``
        operator: the event was already appended to the event list when it
        was created, but it is going to be contained in another one.

        """
        expected = self.topmost_container()
        parent = expected.parent
        if parent is None or isinstance(parent, tuple(except_parent_kinds)):
            return
        got = parent.events.pop() if parent.events else None
        if got is not expected:
            raise OrderError(expected, got)
        log.debug("detached %r from %r", expected, parent)


class Container(Event):
    """Wraps an event, adding repetition ``count`` and alternative ending
    ``labels``.

    Containers are literally everywhere: every builder call returns one::

        >>> score = Score(lambda s: print(type(s.c().event).__name__))
        Note

    Attributes that a container does not have itself are looked up in the
    wrapped event. If a method of the event returns the event, the container
    is returned instead.

    """
    def __init__(self, event, parent):
        super().__init__()
        self._event = event
        self.parent = parent
        self.count = 1
        self.labels = []
        self.on_containing()

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        event = self._event
        attr = getattr(event, name)
        if not callable(attr):
            return attr
        def method(*args, **kwargs):
            result = attr(*args, **kwargs)
            return self if result is event else result
        method.__name__ = name
        return method

    def repr_head(self):
        return repr(self._event)

    @property
    def event(self):
        """The wrapped event. Setting it calls :meth:`on_containing`."""
        return self._event

    @event.setter
    def event(self, event):
        self._event = event
        self.on_containing()

    def on_containing(self):
        """Set the links of the wrapped event and notify it."""
        event = self._event
        if event is not None:
            event.container = self
            event.parent = self.parent
            event.on_contained()

    def set_parent(self, parent):
        self.parent = parent
        if self._event is not None:
            self._event.parent = parent

    def is_event_of(self, cls):
        return isinstance(self, cls) or (
            self._event is not None and self._event.is_event_of(cls))

    def children(self):
        return () if self._event is None else (self._event,)

    def body_equals(self, other):
        return values_equal(self.count, other.count) and \
            values_equal(self.labels, other.labels)

    def relink(self):
        if self._event is not None:
            self._event.container = self

    def write_event(self, context):
        result = codec.write(self._event, context)
        if self.labels:
            result += "'" + ','.join(codec.write(label, context) for label in self.labels)
        if self.count != 1:
            result += '*' + codec.write(self.count, context)
        return result

    def __truediv__(self, other):
        """Make a chord, or a part of multiple instruments.

        The other operand is detached from its event list. If we contain a
        :class:`Part`, the result is a Part with the names of both parts.
        Otherwise, the result is a :class:`Chord`.

        """
        codec.detach(other)
        other_event = other.event if isinstance(other, Container) else other
        if isinstance(self._event, Part):
            self.event = Part(self._event.names + other_event.names, other_event.arg)
        elif isinstance(self._event, Chord):
            self._event.adopt(other_event)
            self._event.events.append(other_event)
        else:
            self.event = Chord(self._event, other_event)
        return self

    def __mul__(self, num):
        """Multiply the repetition count."""
        self.count *= num
        return self

    def __mod__(self, labels):
        """Set the alternative ending labels, a single value or a list."""
        if not isinstance(labels, (list, tuple)):
            labels = [labels]
        self.labels[:] = labels
        return self

    def __pos__(self):
        result = +self._event
        return self if result is self._event else result

    def __neg__(self):
        result = -self._event
        return self if result is self._event else result

    def __invert__(self):
        result = ~self._event
        return self if result is self._event else result


class InlineCall(Event):
    """An inline Lisp function call, written as ``(head arg1 arg2 ...)``.

    Underscores in the head are written as hyphens. The arguments can be
    plain values (see :mod:`~aldadsl.codec`) or events; events are detached
    from their event list when the call is contained.

    """
    def __init__(self, head, *args):
        super().__init__()
        self.head = snake_to_slug(head)
        self.args = list(args)

    def repr_head(self):
        return repr(self.head)

    def children(self):
        return tuple(a for a in self.args if isinstance(a, Node))

    def body_equals(self, other):
        return self.head == other.head and values_equal(self.args, other.args)

    def on_contained(self):
        codec.detach(self.args)

    def write_event(self, context):
        return "({} {})".format(self.head, ' '.join(codec.write(a, context) for a in self.args))


class Note(Event):
    """A note.

    Tildes and dots can't be used in Python names, so underscores are used
    instead. An exclamation mark or a question mark at the end of the
    duration makes the note sharp or flat. The number of underscores at the
    end of the duration means:

    * 0: neither natural nor slur,
    * 1: natural,
    * 2: slur,
    * 3: both natural and slur.

    For example::

        c4_2    ->  c4~2
        f2!     ->  f+2
        g20ms_4?    ->  g-20ms~4
        a6_     ->  a_6
        c__     ->  c~
        f___    ->  f_~

    """
    def __init__(self, pitch, duration=''):
        super().__init__()
        self.count = None
        self.pitch, self.duration = parse_note(str(pitch), str(duration))

    def repr_head(self):
        return repr(self.pitch + self.duration)

    def body_equals(self, other):
        return self.pitch == other.pitch and self.duration == other.duration \
            and values_equal(self.count, other.count)

    def __pos__(self):
        """Append a sharp sign."""
        self.pitch += '+'
        return self

    def __neg__(self):
        """Append a flat sign."""
        self.pitch += '-'
        return self

    def __invert__(self):
        """Append a natural sign."""
        self.pitch += '_'
        return self

    def write_event(self, context):
        result = self.pitch + self.duration
        if self.count is not None:
            result += '*' + codec.write(self.count, context)
        return result


def parse_note(pitch, duration):
    """Return the (pitch, duration) tuple for the note builder name parts.

    Underscores in the duration become tildes; a trailing ``!`` or ``?``
    becomes a ``+`` or ``-`` accidental of the pitch; then the trailing
    tildes are counted (see :class:`Note`).

    """
    duration = duration.replace('_', '~')
    if duration.endswith('!'):
        pitch += '+'
        duration = duration[:-1]
    elif duration.endswith('?'):
        pitch += '-'
        duration = duration[:-1]
    stripped = duration.rstrip('~')
    waves = len(duration) - len(stripped)
    if not waves:
        return pitch, duration
    duration = stripped
    if waves >= 2:
        waves -= 2
        duration += '~'
    return pitch + '_' * waves, duration


class Rest(Event):
    """A rest; underscores in the duration become tildes."""
    def __init__(self, duration=''):
        super().__init__()
        self.duration = str(duration).replace('_', '~')

    def repr_head(self):
        return repr(self.duration)

    def body_equals(self, other):
        return self.duration == other.duration

    def write_event(self, context):
        return 'r' + self.duration


class Octave(Event):
    """An octave change.

    If ``up_or_down`` is 0, the octave ``num`` is set; otherwise the octave is
    changed up (positive) or down (negative) that many times. The unary
    ``+`` and ``-`` operators change ``up_or_down``::

        >>> Score(lambda s: +(+(+(+s.o())))).render()
        '>>>>'

    """
    def __init__(self, num='', up_or_down=0):
        super().__init__()
        self.num = str(num)
        self.up_or_down = up_or_down

    def repr_head(self):
        return repr(self.write_event(None))

    def body_equals(self, other):
        return self.num == other.num and self.up_or_down == other.up_or_down

    def __pos__(self):
        """Octave up."""
        self.up_or_down += 1
        return self

    def __neg__(self):
        """Octave down."""
        self.up_or_down -= 1
        return self

    def write_event(self, context):
        if self.up_or_down > 0:
            return '>' * self.up_or_down
        elif self.up_or_down < 0:
            return '<' * -self.up_or_down
        return 'o' + self.num


class Voice(Event):
    """A voice, written as ``V1:``."""
    def __init__(self, num):
        super().__init__()
        self.num = str(num)

    def repr_head(self):
        return repr(self.num)

    def body_equals(self, other):
        return self.num == other.num

    def write_event(self, context):
        return 'V' + self.num + ':'


class _Named(Event):
    """Base class for events that consist of a slug-case name."""
    prefix = ''

    def __init__(self, name):
        super().__init__()
        self.name = snake_to_slug(name)

    def repr_head(self):
        return repr(self.name)

    def body_equals(self, other):
        return self.name == other.name

    def write_event(self, context):
        return self.prefix + self.name


class Marker(_Named):
    """A marker, written as ``%name``."""
    prefix = '%'


class AtMarker(_Named):
    """A jump to a marker, written as ``@name``."""
    prefix = '@'


class Identifier(_Named):
    """A bare Lisp identifier.

    Not an event in Alda, but needed to write some Lisp code; use it as
    argument of an :class:`InlineCall`.

    """


class Part(Event):
    """A part, with one or more instrument ``names`` and an optional
    nickname ``arg``.

    Names ending with an underscore give access to a member of a group,
    e.g. ``strings_().cello_()`` is written as ``strings.cello:``.

    """
    def __init__(self, names, arg=None):
        super().__init__()
        self.names = [snake_to_slug(name) for name in names]
        self.arg = arg

    def __getattr__(self, name):
        if name.startswith('_') or not name.endswith('_'):
            raise AttributeError(name)
        def accessor(*args):
            return self.access(name[:-1], *args)
        accessor.__name__ = name
        return accessor

    def repr_head(self):
        return repr(self.write_event(None))

    def body_equals(self, other):
        return self.names == other.names and self.arg == other.arg

    def access(self, name, *args):
        """Append ``.name`` to the last part name.

        With one argument, that argument is detached and joined with this
        part into a :class:`Sequence`, that replaces this part in its
        container. Returns the container, or ourselves if we are not
        contained.

        """
        self.names[-1] += '.' + name
        if len(args) != 1:
            return self.container or self
        arg = args[0]
        codec.detach(arg)
        container = self.container
        if container is None:
            parent = self.parent
            container = Container(None, parent)
            if parent is not None:
                for i, event in enumerate(parent.events):
                    if event is self:
                        parent.events[i] = container
                        break
        container.event = Sequence.join(self, arg)
        return container

    def write_event(self, context):
        result = '/'.join(self.names)
        if self.arg is not None:
            result += ' "{}"'.format(self.arg)
        return result + ':'


class GetVariable(Event):
    """A reference to a variable."""
    def __init__(self, name):
        super().__init__()
        self.name = name

    def repr_head(self):
        return repr(self.name)

    def body_equals(self, other):
        return self.name == other.name

    def write_event(self, context):
        return str(self.name)


class RawText(Event):
    """Alda code that is written unmodified."""
    def __init__(self, contents):
        super().__init__()
        self.contents = contents

    def repr_head(self):
        return repr(self.contents)

    def body_equals(self, other):
        return self.contents == other.contents

    def write_event(self, context):
        return self.contents


class Chord(EventList, Event):
    """A chord: notes (and other events) that sound simultaneously.

    In Alda 1 the events are joined with ``/``. Alda 2 does not allow a ``/``
    next to an octave change, so a space is used there instead.

    """
    def write_event(self, context):
        if context.v1:
            return self.events_code('/', context)
        result = []
        after_octave = False
        for event in self.events:
            code = codec.write(event, context)
            octave = bool(code) and isinstance(event, Node) and event.is_event_of(Octave)
            if result:
                result.append(' ' if octave or after_octave else '/')
            result.append(code)
            after_octave = octave
        return ''.join(result)


class Sequence(EventList, Event):
    """A sequence of events, written as ``[a b c]``."""
    def write_event(self, context):
        return '[{}]'.format(self.events_code(' ', context))

    @classmethod
    def join(cls, *events):
        """Create a Sequence by joining events.

        Containers without repetition count and labels are unwrapped, and
        the events of Sequences are inlined.

        """
        joined = []
        for event in events:
            while isinstance(event, Container) and event.count == 1 and not event.labels:
                event = event.event
            if isinstance(event, Sequence):
                joined.extend(event.events)
            else:
                joined.append(event)
        return cls(*joined)


class Cram(EventList, Event):
    """A cram, written as ``{a b c}4``."""
    def __init__(self, duration, block=None):
        super().__init__(block=block)
        self.duration = duration

    def repr_head(self):
        return repr(self.duration)

    def body_equals(self, other):
        return self.duration == other.duration and super().body_equals(other)

    def write_event(self, context):
        return '{{{}}}{}'.format(self.events_code(' ', context), self.duration)


class SetVariable(EventList, Event):
    """A variable assignment, written as ``name = events`` and a newline.

    Its events are the events given as arguments, followed by the events
    built in the block. The variable is declared in the parent event list
    when the assignment is contained.

    """
    def __init__(self, name, *events, block=None):
        super().__init__(block=block)
        self.name = name
        self.take_arguments(events)

    def repr_head(self):
        return repr(self.name)

    def body_equals(self, other):
        return self.name == other.name and super().body_equals(other)

    def on_contained(self):
        super().on_contained()
        if self.parent is not None:
            self.parent.variables.add(self.name)

    def write_event(self, context):
        return '{} = {}\n'.format(self.name, self.events_code(' ', context))
