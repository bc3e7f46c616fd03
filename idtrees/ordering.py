from typing import List, Sequence

from idtrees.sample import Sample


def sort_by_attr(samples: Sequence[Sample], attr: str) -> List[Sample]:
  '''
  samples in ascending order of a numeric attribute

  returns a new list; the input sequence is left alone
  '''
  return sorted(samples, key=lambda s: s.attr(attr))
