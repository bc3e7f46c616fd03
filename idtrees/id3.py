from collections import Counter
from contextlib import nullcontext
from typing import Sequence

from idtrees import params as params_module
from idtrees.entropy import EntropyCounter
from idtrees.params import Params
from idtrees.sample import Sample
from idtrees.search import choose_split, resolve_workers
from idtrees.tree import NumSplit, Tree
from idtrees.utils import timed, tree_stats


def id3(samples: Sequence[Sample], attrs: Sequence[str], max_workers: int = 0) -> Tree:
  '''
  grow a classification tree with ID3

  every attribute stays available at every node, so a numeric attribute
  can be split again at a different threshold further down

  max_workers bounds the threads used per node; 0 means one per cpu
  '''
  assert len(samples) > 0, 'cannot build a tree from 0 samples'
  max_workers = resolve_workers(max_workers)
  attrs = list(attrs)

  if params_module.DEBUG_STATS:
    ctx = timed(f'growing tree on {len(samples)} samples, {len(attrs)} attrs, {max_workers=}')
  else:
    ctx = nullcontext()

  with ctx:
    base_entropy = EntropyCounter(samples).entropy()
    tree = _grow(samples, attrs, max_workers, base_entropy)

  if params_module.DEBUG_STATS:
    print(tree_stats(tree))
  return tree


def fit(samples: Sequence[Sample], attrs: Sequence[str], params: Params) -> Tree:
  return id3(samples, attrs, params.max_workers)


def _grow(
    samples: Sequence[Sample],
    attrs: Sequence[str],
    max_workers: int,
    entropy: float
) -> Tree:
  if entropy == 0:
    # pure
    return create_leaf(samples)

  split = choose_split(samples, attrs, max_workers)
  if split is None or split.entropy >= entropy:
    # couldn't decrease entropy by splitting
    return create_leaf(samples)

  if split.is_numeric:
    less_samples, greater_samples = split.num_split_samples
    less_entropy, greater_entropy = split.num_split_entropies
    return Tree(
      attr=split.attr,
      num_split=NumSplit(
        split.threshold,
        _grow(less_samples, attrs, max_workers, less_entropy),
        _grow(greater_samples, attrs, max_workers, greater_entropy),
      ),
    )

  return Tree(
    attr=split.attr,
    val_split={
      val: _grow(group, attrs, max_workers, split.val_split_entropies[val])
      for val, group in split.val_split_samples.items()
    },
  )


def create_leaf(samples: Sequence[Sample]) -> Tree:
  ''' empirical class distribution of the samples '''
  counts = Counter(s.label() for s in samples)
  total = len(samples)
  return Tree(classification={cls: count / total for cls, count in counts.items()})
