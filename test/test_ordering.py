from idtrees.ordering import sort_by_attr
from idtrees.sample import MapSample


def test_sort_by_attr():
  samples = [MapSample('A', {'x': x, 'y': -x}) for x in [3.5, -1.0, 2.0, 2.0, 10.0]]
  ordered = sort_by_attr(samples, 'x')
  assert [s.attr('x') for s in ordered] == [-1.0, 2.0, 2.0, 3.5, 10.0]
  assert [s.attr('y') for s in sort_by_attr(samples, 'y')] == [-10.0, -3.5, -2.0, -2.0, 1.0]

  # input is untouched
  assert [s.attr('x') for s in samples] == [3.5, -1.0, 2.0, 2.0, 10.0]
  assert set(map(id, ordered)) == set(map(id, samples))


def test_sort_ints_keeps_ties_adjacent():
  xs = [5, 1, 5, 3, 1, 5, 3]
  samples = [MapSample(i, {'x': x}) for i, x in enumerate(xs)]
  ordered = [s.attr('x') for s in sort_by_attr(samples, 'x')]
  assert ordered == [1, 1, 3, 3, 5, 5, 5]
