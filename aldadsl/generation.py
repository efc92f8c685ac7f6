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
The notation generation, i.e. the dialect the text is written in.

Alda 1 and Alda 2 disagree on how a few constructs are written: lists, maps
and symbols in inline Lisp code, and octave changes inside chords. The
generation to write is an ambient setting, stored in a
:class:`~contextvars.ContextVar`, so concurrently running threads or tasks
never see each other's value::

    >>> from aldadsl import generation
    >>> generation.get()
    'v2'
    >>> with generation.using(generation.V1):
    ...     generation.get()
    'v1'

A single render can also override it, see :meth:`.score.Score.render`.

"""

import contextlib
import contextvars

from .error import GenerationError


V1 = 'v1'
V2 = 'v2'

GENERATIONS = (V1, V2)

DEFAULT = V2


_generation = contextvars.ContextVar('generation', default=DEFAULT)


def check(value):
    """Return value if it is a known generation, otherwise raise GenerationError."""
    if value not in GENERATIONS:
        raise GenerationError(value)
    return value


def get():
    """Return the generation of the current context."""
    return _generation.get()


def set(value):
    """Set the generation for the current context.

    Returns a token that can be used to :func:`reset` the previous value.

    """
    return _generation.set(check(value))


def reset(token):
    """Restore the generation that was active before :func:`set` returned token."""
    _generation.reset(token)


def is_v1():
    """Return True if the current generation is Alda 1."""
    return get() == V1


def is_v2():
    """Return True if the current generation is Alda 2."""
    return get() == V2


@contextlib.contextmanager
def using(value):
    """Context manager temporarily setting the generation."""
    token = set(value)
    try:
        yield value
    finally:
        reset(token)
