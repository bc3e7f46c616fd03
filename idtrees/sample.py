from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Protocol

import numpy as np


class Sample(Protocol):
  ''' anything with a class label and named attribute values '''

  def label(self) -> Hashable:
    ...

  def attr(self, name: str) -> Any:
    ...


class ValueKind(Enum):
  CATEGORICAL = 'categorical'
  INT = 'int'
  FLOAT = 'float'


def value_kind(value: Any) -> ValueKind:
  # bool is an int subclass, but has no useful ordering for splits
  if isinstance(value, (bool, np.bool_)):
    return ValueKind.CATEGORICAL
  if isinstance(value, (int, np.integer)):
    return ValueKind.INT
  if isinstance(value, (float, np.floating)):
    return ValueKind.FLOAT
  return ValueKind.CATEGORICAL


@dataclass(frozen=True, eq=False)
class MapSample:
  ''' a sample backed by a dict of attribute name => value '''
  cls: Hashable
  attrs: Dict[str, Any] = field(default_factory=dict)

  def label(self) -> Hashable:
    return self.cls

  def attr(self, name: str) -> Any:
    return self.attrs[name]
