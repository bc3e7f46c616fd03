from dataclasses import dataclass

# print timing and tree shape after every build
DEBUG_STATS = False

@dataclass
class Params:
  # threads per node for the split search
  # 0 means one per cpu; 1 makes tie-breaking deterministic
  max_workers: int = 0
