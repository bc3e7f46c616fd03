from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Hashable, Iterator, Mapping, Optional


class NodeKind(Enum):
  LEAF = 'leaf'
  CATEGORICAL = 'categorical'
  NUMERIC = 'numeric'


@dataclass(frozen=True)
class NumSplit:
  threshold: Any

  # attr <= threshold
  less_equal: 'Tree'

  # attr > threshold
  greater: 'Tree'


@dataclass(frozen=True)
class Tree:
  # non-none for leaves: class => probability
  classification: Optional[Mapping[Hashable, float]] = None

  # non-none for splits
  attr: Optional[str] = None

  # exactly one of these is set on a split
  # values that never reached this node during training have no child
  val_split: Optional[Mapping[Hashable, 'Tree']] = None
  num_split: Optional[NumSplit] = None

  def __post_init__(self):
    if self.classification is not None:
      assert self.attr is None
      assert self.val_split is None and self.num_split is None
      object.__setattr__(self, 'classification', MappingProxyType(dict(self.classification)))
    else:
      assert self.attr is not None
      assert (self.val_split is None) != (self.num_split is None)
      if self.val_split is not None:
        object.__setattr__(self, 'val_split', MappingProxyType(dict(self.val_split)))

  @property
  def is_leaf(self) -> bool:
    return self.classification is not None

  @property
  def kind(self) -> NodeKind:
    if self.classification is not None:
      return NodeKind.LEAF
    elif self.num_split is not None:
      return NodeKind.NUMERIC
    else:
      return NodeKind.CATEGORICAL

  def children(self) -> Iterator['Tree']:
    if self.num_split is not None:
      yield self.num_split.less_equal
      yield self.num_split.greater
    elif self.val_split is not None:
      yield from self.val_split.values()

  def leaves(self) -> Iterator['Tree']:
    if self.is_leaf:
      yield self
    for child in self.children():
      yield from child.leaves()

  def __str__(self, level = 0):
    ''' recursively print the tree '''
    indent = '  ' * level
    if self.classification is not None:
      probs = ', '.join(f'{c}: {p:.4f}' for c, p in self.classification.items())
      return f'{indent}{{{probs}}}\n'
    elif self.num_split is not None:
      split = self.num_split
      return (f'{indent}[{self.attr}] <= {split.threshold}:\n'
        + split.less_equal.__str__(level + 1)
        + f'{indent}[{self.attr}] > {split.threshold}:\n'
        + split.greater.__str__(level + 1))
    else:
      assert self.val_split is not None
      return ''.join(
        f'{indent}[{self.attr}] == {val}:\n' + child.__str__(level + 1)
        for val, child in self.val_split.items())
