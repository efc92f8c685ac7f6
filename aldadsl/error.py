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
The exceptions raised while building or rendering a score.
"""


class OrderError(RuntimeError):
    """Raised when events are taken back out of an event list in the wrong
    order.

    Only the last event of an event list can be detached. If the event that
    was actually removed is not the ``expected`` one, this error is raised;
    the removed event is available as ``got``. For example::

        >>> from aldadsl import Score
        >>> def music(s):
        ...     motif = s.f4(s.f(s.e(s.e(s.d(s.d(s.c2()))))))
        ...     s.g4(s.f(s.e(s.d(s.c2()))))    # comment this out and all is fine
        ...     s.c4(s.c(s.g(motif)))
        >>> Score(music)
        Traceback (most recent call last):
        ...
        aldadsl.error.OrderError: events are out of order

    The removed event is not put back; the events appended before the error
    remain inspectable.

    """
    def __init__(self, expected, got):
        super().__init__('events are out of order')
        self.expected = expected
        self.got = got


class UnhandledCallError(AttributeError):
    """Raised when a builder call matches none of the dispatcher rules.

    The error is raised when the call is performed, not when the attribute is
    looked up: every name that is not really defined gives a builder call, so
    :func:`hasattr` is True for any such name on an event list.

    """
    def __init__(self, name):
        super().__init__("no builder rule for {}".format(repr(name)))
        self.name = name


class GenerationError(ValueError):
    """Raised when an unknown notation generation (dialect) is requested."""
    def __init__(self, value):
        super().__init__("unknown generation: {}".format(repr(value)))
        self.value = value
