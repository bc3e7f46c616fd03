from time import time
from contextlib import contextmanager
from typing import Dict

import numpy as np

from idtrees.tree import Tree


@contextmanager
def timed(msg: str):
  print(msg)
  start = time()
  yield
  stop = time()
  print(f'({stop - start:.1f}s)')


def depth(tree: Tree) -> int:
  ''' number of splits on the longest path from root to leaf '''
  return max((1 + depth(child) for child in tree.children()), default=0)


def split_counts(tree: Tree) -> Dict[str, int]:
  ''' attr => number of nodes splitting on it '''
  counts: Dict[str, int] = {}
  stack = [tree]
  while len(stack) > 0:
    node = stack.pop()
    if node.attr is not None:
      counts[node.attr] = counts.get(node.attr, 0) + 1
    stack.extend(node.children())
  return counts


def tree_stats(tree: Tree) -> str:
  leaf_sizes = np.array([len(leaf.classification) for leaf in tree.leaves()])
  splits = split_counts(tree)
  node_count = len(leaf_sizes) + sum(splits.values())
  return (f'tree with {node_count} nodes, {len(leaf_sizes)} leaves, depth {depth(tree)}\n'
    + f'  classes per leaf: min={leaf_sizes.min()} max={leaf_sizes.max()} '
    + f'mean={np.mean(leaf_sizes):.2f}\n'
    + f'  splits by attr: {splits}')
