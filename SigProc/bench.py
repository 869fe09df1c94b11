import time
import numpy as np
import pandas as pd
from .fft import fft

def compare(max_exp:int|None = 12, samples:int|None = 5, seed:int|None = None, workers:int|None = 1):
    """
    Time fft against numpy.fft.fft for N = 2^0 .. 2^max_exp.
    Returns a DataFrame with one row per N: n, my_time, np_time, factor, allclose.
    """
    # defalut value if no parameter is passed
    if max_exp is None: max_exp = 12
    if samples is None: samples = 5
    if max_exp < 0: raise ValueError(f'max_exp = {max_exp}, must be >= 0')
    if samples < 1: raise ValueError(f'samples = {samples}, must be >= 1')
    rng = np.random.default_rng(seed)
    rows = []
    for i in range(max_exp + 1):
        n = 2**i
        a = [rng.random(n) + 1j*rng.random(n) for _ in range(samples)]
        my_time = []; np_time = []; allclose = []
        for x in a:
            start = time.perf_counter()
            mine = fft(x, workers=workers)
            my_time.append(time.perf_counter() - start)

            start = time.perf_counter()
            ref = np.fft.fft(x)
            np_time.append(time.perf_counter() - start)

            allclose.append(np.allclose(mine, ref, atol=1e-10))
        my_avg = sum(my_time) / samples
        np_avg = sum(np_time) / samples
        rows.append({'n': n, 'my_time': my_avg, 'np_time': np_avg,
                     'factor': my_avg / np_avg if np_avg > 0 else float('inf'),
                     'allclose': all(allclose)})
    return pd.DataFrame(rows, columns=['n', 'my_time', 'np_time', 'factor', 'allclose'])
