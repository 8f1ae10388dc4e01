# scripts/run_counts.py
from time import time
from dfagen.enumerator import table_counts

for k in (2, 3):          # alphabet sizes
    start = time()
    print(f"k={k}", table_counts(range(1, 6 if k == 2 else 5), ks=[k]))
    print("elapsed", time() - start, "s")
