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
The aldadsl module.

Build `Alda <https://alda.io/>`_ music notation using Python calls::

    >>> from aldadsl import Score
    >>> Score(lambda s: (s.piano_(), s.c(s.d(s.e())))).render()
    'piano: [c d e]'

The names of the calls decide which events are created, see
:mod:`aldadsl.dispatch`. Playing or exporting the score is left to the
``alda`` command, e.g. ``alda play --code "$(python my_score.py)"``.

"""

from . import generation
from .codec import Symbol, sym
from .error import GenerationError, OrderError, UnhandledCallError
from .pkginfo import version, version_string
from .score import Score


__all__ = (
    'Score', 'Symbol', 'sym', 'generation',
    'OrderError', 'UnhandledCallError', 'GenerationError',
    'version', 'version_string',
)
