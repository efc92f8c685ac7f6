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
Test the notation generation setting and the generation dependent output.
"""

import threading
import warnings

import pytest

### find aldadsl
import sys
sys.path.insert(0, '.')

from aldadsl import Score, GenerationError, generation, sym
from aldadsl.datatypes import RenderContext


def chords(s):
    s.x(lambda x: (x.c(), x.call('o!'), x.e()))
    s.x(s.o4(), s.c(), s.e())
    s.c() / s.call('o?') / s.e()


def check_default():
    assert generation.get() == generation.DEFAULT == 'v2'
    assert generation.is_v2()
    assert not generation.is_v1()
    assert RenderContext().generation == 'v2'


def check_using():
    with generation.using(generation.V1) as value:
        assert value == 'v1'
        assert generation.is_v1()
        assert RenderContext().v1
        with generation.using('v2'):
            assert generation.is_v2()
        assert generation.is_v1()
    assert generation.is_v2()

    token = generation.set('v1')
    assert generation.get() == 'v1'
    generation.reset(token)
    assert generation.get() == 'v2'


def check_unknown():
    with pytest.raises(GenerationError):
        generation.set('v3')
    with pytest.raises(ValueError):
        RenderContext('alda')
    with pytest.raises(GenerationError) as info:
        Score().render('1')
    assert info.value.value == '1'
    assert generation.get() == 'v2'


def check_chords():
    score = Score(chords)
    assert score.render('v1') == 'c/>/e o4/c/e c/</e'
    assert score.render('v2') == 'c > e o4 c/e c < e'
    with generation.using('v1'):
        assert str(score) == 'c/>/e o4/c/e c/</e'
    assert str(score) == 'c > e o4 c/e c < e'


def check_inline_lisp():
    def music(s):
        s.key_sig([sym('d'), sym('major')])
        s.set_note_length(sym('quarter'))
    score = Score(music)
    assert score.render('v1') == '(key-sig [:d :major]) (set-note-length :quarter)'
    assert score.render('v2') == "(key-sig '(d major)) (set-note-length 'quarter)"


def check_part_warning():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        with generation.using('v1'):
            Score(lambda s: s.piano_(s.c()))
        Score(lambda s: s.piano_('pno'))
    with pytest.warns(UserWarning):
        Score(lambda s: s.piano_(s.c()))


def check_threads():
    result = []
    def run():
        generation.set('v1')
        result.append(Score(lambda s: s.key_sig(sym('d'))).render())
    with generation.using('v2'):
        t = threading.Thread(target=run)
        t.start()
        t.join()
        assert generation.get() == 'v2'
    assert result == ['(key-sig :d)']


def test_main():
    check_default()
    check_using()
    check_unknown()
    check_chords()
    check_inline_lisp()
    check_part_warning()
    check_threads()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
