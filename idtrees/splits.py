from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Tuple

from idtrees.entropy import EntropyCounter
from idtrees.ordering import sort_by_attr
from idtrees.sample import Sample, ValueKind, value_kind


@dataclass
class PotentialSplit:
  attr: str

  # weighted average of the child entropies
  entropy: float = 0.0

  # categorical splits: attribute value => child samples / child entropy
  val_split_samples: Dict[Hashable, List[Sample]] = field(default_factory=dict)
  val_split_entropies: Dict[Hashable, float] = field(default_factory=dict)

  # numeric splits: (<= threshold, > threshold)
  threshold: Optional[Any] = None
  num_split_samples: Tuple[List[Sample], List[Sample]] = field(default_factory=lambda: ([], []))
  num_split_entropies: Tuple[float, float] = (0.0, 0.0)

  @property
  def is_numeric(self) -> bool:
    return self.threshold is not None

  def __str__(self):
    if self.is_numeric:
      less, greater = self.num_split_samples
      return (f'attr: {self.attr}, threshold: {self.threshold}, '
        + f'entropy: {self.entropy:.4f}, '
        + f'less_equal_count: {len(less)}, greater_count: {len(greater)}')
    counts = {v: len(s) for v, s in self.val_split_samples.items()}
    return f'attr: {self.attr}, entropy: {self.entropy:.4f}, counts: {counts}'


def create_potential_split(samples: Sequence[Sample], attr: str) -> Optional[PotentialSplit]:
  '''
  the best way to split samples on a single attribute

  None if there is no way to split (a numeric attribute with only one value)
  '''
  assert len(samples) > 0, 'cannot split 0 samples'

  # only the first sample is checked; all samples must agree on the kind
  kind = value_kind(samples[0].attr(attr))
  if kind == ValueKind.INT:
    return _numeric_split(samples, attr, _int_midpoint)
  elif kind == ValueKind.FLOAT:
    return _numeric_split(samples, attr, _float_midpoint)
  else:
    return _categorical_split(samples, attr)


def _categorical_split(samples: Sequence[Sample], attr: str) -> PotentialSplit:
  split = PotentialSplit(attr)
  for s in samples:
    split.val_split_samples.setdefault(s.attr(attr), []).append(s)

  total = len(samples)
  for val, group in split.val_split_samples.items():
    e = EntropyCounter(group).entropy()
    split.val_split_entropies[val] = e
    split.entropy += len(group) / total * e
  return split


def _int_midpoint(lo: int, hi: int) -> int:
  # python ints so narrow numpy dtypes can't overflow on hi - lo
  # the midpoint is in [lo, hi) so it always fits back in the dtype
  # hi > lo so floor division truncates
  return type(lo)(int(lo) + (int(hi) - int(lo)) // 2)


def _float_midpoint(lo: float, hi: float) -> float:
  # same for float16 / float32, where hi - lo can overflow to inf
  mid = type(lo)(float(lo) + (float(hi) - float(lo)) / 2)
  if not mid < hi:
    # adjacent values; rounding landed on hi
    return lo
  return mid


def find_cutoffs(
    ordered: Sequence[Sample],
    attr: str,
    midpoint: Callable[[Any, Any], Any]
) -> Tuple[List[int], List[Any]]:
  '''
  every index where the sorted attribute value strictly increases,
  and the threshold halfway between the values on either side

  e.g.
    ordered vals: [1, 1, 4, 4, 4, 9]
     cutoff_idxs: [2, 5]
         cutoffs: [2, 6]
  '''
  cutoff_idxs = []
  cutoffs = []
  last = ordered[0].attr(attr)
  for i in range(1, len(ordered)):
    val = ordered[i].attr(attr)
    if val > last:
      cutoff_idxs.append(i)
      cutoffs.append(midpoint(last, val))
      last = val
  return cutoff_idxs, cutoffs


def _numeric_split(
    samples: Sequence[Sample],
    attr: str,
    midpoint: Callable[[Any, Any], Any]
) -> Optional[PotentialSplit]:
  ordered = sort_by_attr(samples, attr)
  cutoff_idxs, cutoffs = find_cutoffs(ordered, attr, midpoint)
  if len(cutoff_idxs) == 0:
    # every sample has the same value
    return None

  # sweep the cutoff left to right, moving samples from greater => less
  less = EntropyCounter(ordered[:cutoff_idxs[0]])
  greater = EntropyCounter(ordered[cutoff_idxs[0]:])
  total = len(ordered)

  best_i = 0
  best_entropy = 0.0
  best_entropies = (0.0, 0.0)
  for i, cutoff_idx in enumerate(cutoff_idxs):
    if i > 0:
      for s in ordered[cutoff_idxs[i-1]:cutoff_idx]:
        less.add(s)
        greater.remove(s)

    less_e = less.entropy()
    greater_e = greater.entropy()
    entropy = (less.total_count * less_e + greater.total_count * greater_e) / total

    # ties keep the leftmost cutoff
    if i == 0 or entropy < best_entropy:
      best_i = i
      best_entropy = entropy
      best_entropies = (less_e, greater_e)

  split_idx = cutoff_idxs[best_i]
  return PotentialSplit(
    attr,
    entropy=best_entropy,
    threshold=cutoffs[best_i],
    num_split_samples=(ordered[:split_idx], ordered[split_idx:]),
    num_split_entropies=best_entropies,
  )
