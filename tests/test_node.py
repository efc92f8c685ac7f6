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
Test the node module.
"""

import io

### find aldadsl
import sys
sys.path.insert(0, '.')

from aldadsl import Score
from aldadsl.event import Chord, Container, Note, Part, Sequence
from aldadsl.node import Node, copy_value, values_equal


def music(s):
    s.piano_()
    s.c() / s.e()


def check_links():
    score = Score(lambda s: s.c(s.d(s.e())))
    container = score.events[0]
    sequence = container.event
    assert container.parent is score
    assert sequence.parent is score
    assert sequence.container is container
    assert container.container is None
    note = sequence.events[0]
    assert isinstance(note, Note)
    assert note.parent is sequence
    assert note.container is None
    assert list(note.ancestors()) == [sequence, score]
    assert note.root() is score
    assert score.root() is score
    assert sequence.topmost_container() is container
    assert note.topmost_container() is note


def check_descendants():
    score = Score(music)
    assert sum(1 for _ in score.descendants()) == 6
    assert [n.pitch for n in score.instances_of(Note)] == ['c', 'e']
    assert len(list(score.instances_of(Container))) == 2
    assert next(score.instances_of(Chord)).parent is score


def check_identity():
    a, b = Note('c'), Note('c')
    assert a != b
    assert a == a
    assert a.equals(b)
    assert not a.equals(Note('d'))
    assert len({a, b}) == 2
    assert a


def check_copy():
    score = Score(music)
    score2 = score.copy()
    assert score.equals(score2)
    assert score2.render('v1') == 'piano: c/e'
    assert score2.events[1] is not score.events[1]
    assert score2.events[1].parent is score2
    assert score2.events[1].event.container is score2.events[1]
    chord = score2.events[1].event
    assert all(n.parent is chord for n in chord.events)
    chord.events[1].pitch = 'g'
    assert not score.equals(score2)
    assert score.render('v1') == 'piano: c/e'
    assert score2.render('v1') == 'piano: c/g'

    part = score.events[0].event.copy()
    assert isinstance(part, Part)
    assert part.parent is None
    assert part.container is None


def check_values():
    notes = [Note('c'), (Note('d'), 1)]
    copy = copy_value(notes)
    assert copy[0] is not notes[0]
    assert values_equal(notes, copy)
    assert not values_equal([1], (1,))
    assert not values_equal(1, 1.0)
    assert values_equal({'a': Note('e')}, {'a': Note('e')})


def check_dump():
    f = io.StringIO()
    Score(music).dump(f, 'ascii')
    assert f.getvalue() == '\n'.join((
        "<Score (2 events)>",
        " |-<event.Container <event.Part 'piano:'>>",
        " |  `-<event.Part 'piano:'>",
        " `-<event.Container <event.Chord>>",
        "    `-<event.Chord>",
        "       |-<event.Note 'c'>",
        "       `-<event.Note 'e'>",
        "",
    ))


def check_part_access_without_container():
    def music(s):
        sequence = s.c(s.str_()).event
        part = sequence.events[1]
        assert part.container is None
        assert part.cello_() is part
        part.names[-1] = 'str'
        container = part.cello_(sequence.d())
        assert isinstance(container, Container)
        assert isinstance(container.event, Sequence)
        assert sequence.events[1] is container
        assert part.parent is container.event
    assert Score(music).render() == '[c [str.cello: d]]'


def check_node_base():
    n = Node()
    assert n.parent is None
    assert n.container is None
    assert n.children() == ()
    assert n.copy().equals(n)


def test_main():
    check_links()
    check_descendants()
    check_identity()
    check_copy()
    check_values()
    check_dump()
    check_part_access_without_container()
    check_node_base()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
