from collections import defaultdict
from typing import DefaultDict, Hashable, Sequence

import numpy as np

from idtrees.sample import Sample


class EntropyCounter:
  '''
  running class counts over a set of samples

  add / remove are O(1) so a threshold sweep can move one sample at a time
  from one side of a cutoff to the other without recounting
  '''

  def __init__(self, samples: Sequence[Sample] = ()):
    self.class_counts: DefaultDict[Hashable, int] = defaultdict(int)
    self.total_count = len(samples)
    for s in samples:
      self.class_counts[s.label()] += 1

  def entropy(self) -> float:
    '''
    shannon entropy of the class distribution, in nats:
      -sum(p * ln(p)) over classes with p > 0
    '''
    assert self.total_count > 0, 'entropy of 0 samples is undefined'
    counts = np.fromiter(self.class_counts.values(), dtype=np.double)

    # removed classes linger with a count of 0; log(0) would give nan
    counts = counts[counts > 0]
    p = counts / self.total_count
    return float(-np.sum(p * np.log(p)))

  def add(self, s: Sample) -> None:
    self.class_counts[s.label()] += 1
    self.total_count += 1

  def remove(self, s: Sample) -> None:
    self.class_counts[s.label()] -= 1
    self.total_count -= 1
