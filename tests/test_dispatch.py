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
Test the classification of builder call names and note parsing.
"""

import pytest

### find aldadsl
import sys
sys.path.insert(0, '.')

from aldadsl import Score, UnhandledCallError
from aldadsl.dispatch import classify, classified
from aldadsl.event import parse_note, snake_to_slug, slug_to_snake


def check_classify():
    table = (
        ('var__', ('set_variable', ('var',))),
        ('key_sig__', ('set_variable', ('key_sig',))),
        ('piano_', ('part', ('piano',))),
        ('ab_', ('part', ('ab',))),
        ('tempo', ('lisp_or_variable', ())),
        ('key_sig', ('lisp_or_variable', ())),
        ('t4', ('cram', ('4',))),
        ('t', ('cram', ('',))),
        ('c', ('note', ('c', ''))),
        ('c4_2', ('note', ('c', '4_2'))),
        ('g20ms_4?', ('note', ('g', '20ms_4?'))),
        ('r8', ('rest', ('8',))),
        ('r', ('rest', ('',))),
        ('x', ('chord', ())),
        ('s', ('sequence', ())),
        ('o!', ('octave_up', ())),
        ('o?', ('octave_down', ())),
        ('o', ('octave', ('',))),
        ('o4', ('octave', ('4',))),
        ('v1', ('voice', ('1',))),
        ('__here', ('at_marker', ('here',))),
        ('_x_', ('identifier', ('x',))),
        ('_here', ('marker', ('here',))),
        ('__', ('marker', ('_',))),
    )
    for name, result in table:
        assert classify(name) == result, name
    for name in ('q', 'h', 'v', 'C', 'V1', '4', 'o4x', '_'):
        assert classify(name) is None, name


def check_cache():
    assert classified['c4'] == ('note', ('c', '4'))
    assert classified['c4'] is classified['c4']
    assert classified['q'] is None


def check_parse_note():
    table = (
        (('c', ''), ('c', '')),
        (('c', '4_2'), ('c', '4~2')),
        (('f', '2!'), ('f+', '2')),
        (('g', '20ms_4?'), ('g-', '20ms~4')),
        (('a', '6_'), ('a_', '6')),
        (('c', '__'), ('c', '~')),
        (('f', '___'), ('f_', '~')),
        (('b', '___!'), ('b+_', '~')),
        (('e', '_'), ('e_', '')),
    )
    for args, result in table:
        assert parse_note(*args) == result, args


def check_slugs():
    assert snake_to_slug('key_sig') == 'key-sig'
    assert slug_to_snake('key-sig') == 'key_sig'
    assert snake_to_slug('tempo!') == 'tempo!'


def check_unhandled():
    with pytest.raises(UnhandledCallError) as info:
        Score(lambda s: s.q())
    assert info.value.name == 'q'
    assert isinstance(info.value, AttributeError)
    with pytest.raises(UnhandledCallError):
        Score(lambda s: s.call('V1'))
    with pytest.raises(UnhandledCallError):
        Score(lambda s: s.call('4'))


def check_reserved_attributes():
    score = Score()
    with pytest.raises(AttributeError):
        score.__foo__
    assert not hasattr(score, '__length_hint__')
    assert callable(score.anything)
    assert hasattr(score, 'q')
    with pytest.raises(UnhandledCallError):
        score.q()
    assert score.events == []


def test_main():
    check_classify()
    check_cache()
    check_parse_note()
    check_slugs()
    check_unhandled()
    check_reserved_attributes()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
