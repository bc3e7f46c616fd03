import os
import queue
import threading
from typing import List, Optional, Sequence

from idtrees.sample import Sample
from idtrees.splits import PotentialSplit, create_potential_split

_VERBOSE = False


def resolve_workers(max_workers: int) -> int:
  ''' 0 means use every cpu this process may run on '''
  assert max_workers >= 0, 'max_workers must be >= 0'
  if max_workers == 0:
    if hasattr(os, 'sched_getaffinity'):
      # respects cpu affinity and cgroup cpusets
      return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1
  return max_workers


def choose_split(
    samples: Sequence[Sample],
    attrs: Sequence[str],
    max_workers: int
) -> Optional[PotentialSplit]:
  '''
  evaluate every attribute on up to max_workers threads, and return the split
  with the lowest entropy

  None if no attribute can split the samples

  among exact ties the first split to arrive wins, which depends on thread
  scheduling unless max_workers == 1
  '''
  if len(attrs) == 0:
    return None

  todo: queue.Queue = queue.Queue()
  for attr in attrs:
    todo.put(attr)

  results: queue.Queue = queue.Queue()
  errors: List[BaseException] = []

  def work() -> None:
    try:
      while True:
        try:
          attr = todo.get_nowait()
        except queue.Empty:
          return
        split = create_potential_split(samples, attr)
        if split is not None:
          results.put(split)
    except Exception as e:
      errors.append(e)

  worker_count = min(resolve_workers(max_workers), len(attrs))
  threads = [threading.Thread(target=work, daemon=True) for _ in range(worker_count)]
  for t in threads:
    t.start()
  for t in threads:
    t.join()

  if errors:
    raise errors[0]

  best = None
  while not results.empty():
    split = results.get_nowait()
    if best is None or split.entropy < best.entropy:
      best = split

  if _VERBOSE:
    print(f'best split of {len(samples)} samples: {best}')

  return best
