############################
# recursive FFT
# - radix-2 decimation in time (Cooley-Tukey)
# - inverse with conjugated twiddle + 1/N
# - power of two check / zero padding
############################

import numpy as np
from concurrent.futures import ThreadPoolExecutor

class InvalidInputLength(ValueError):
    """Signal length is zero or not a power of two."""
    def __init__(self, length:int):
        self.length = length
        if length == 0:
            msg = 'signal length is 0, need a power of two (N >= 1)'
        else:
            msg = f'signal length {length} is not a power of two (next is {next_power_of_two(length)})'
        super().__init__(msg)

def is_power_of_two(n:int) -> bool:
    return n > 0 and n & (n - 1) == 0

def next_power_of_two(n:int) -> int:
    if n < 1: raise ValueError(f'n = {n}, must be >= 1')
    return 1 << (n - 1).bit_length()

def validate_length(n:int):
    if not is_power_of_two(n): raise InvalidInputLength(n)

def _as_signal(signal):
    # always complex, so every recursion level returns the same dtype
    x = np.asarray(signal, dtype=np.complex128)
    if x.ndim != 1: raise ValueError(f'signal must be 1-D, got shape {x.shape}')
    return x

def pad_to_power_of_two(signal):
    x = _as_signal(signal)
    if x.size == 0: raise InvalidInputLength(0)
    padded = np.zeros(next_power_of_two(x.size), dtype=np.complex128)
    padded[:x.size] = x
    return padded

def _fft_rec(x, sign:int):
    N = x.size
    if N == 1: return x.copy() # base case
    # divide
    even = _fft_rec(x[0::2], sign)
    odd = _fft_rec(x[1::2], sign)
    # merge, twiddle from this level's N
    return _butterfly(even, odd, N, sign)

def _butterfly(even, odd, N:int, sign:int):
    half = N // 2
    twiddle = np.exp(sign * 2j * np.pi * np.arange(half) / N)
    X = np.empty(N, dtype=np.complex128)
    t = twiddle * odd
    X[:half] = even + t
    X[half:] = even - t
    return X

def _transform(signal, sign:int, pad:bool, workers:int|None, parallel_threshold:int|None):
    if workers is None: workers = 1
    if parallel_threshold is None: parallel_threshold = 4096
    x = pad_to_power_of_two(signal) if pad else _as_signal(signal)
    N = x.size
    validate_length(N)
    if workers < 2 or N < parallel_threshold or N == 1:
        return _fft_rec(x, sign)
    # fork the two halves, join at the butterfly
    with ThreadPoolExecutor(max_workers=2) as pool:
        even = pool.submit(_fft_rec, x[0::2], sign)
        odd = pool.submit(_fft_rec, x[1::2], sign)
        return _butterfly(even.result(), odd.result(), N, sign)

def fft(signal, pad:bool = False, workers:int|None = 1, parallel_threshold:int|None = 4096):
    """
    Discrete Fourier transform of a power of two length signal.
    X[k] = sum_n x[n] * exp(-2*pi*i*k*n/N)
    Args:
        signal: 1-D sequence of real or complex samples, len(signal) = 2^m.
        pad (bool): zero pad to the next power of two instead of raising.
        workers (int): > 1 runs the two top level halves on a thread pool.
        parallel_threshold (int): minimum N before the halves are forked.
    Returns:
        np.ndarray: complex128 spectrum, bin 0 = DC.
    Raises:
        InvalidInputLength: length is 0 or not a power of two (and pad is False).
    """
    return _transform(signal, -1, pad, workers, parallel_threshold)

def ifft(spectrum, pad:bool = False, workers:int|None = 1, parallel_threshold:int|None = 4096):
    """Inverse of fft: conjugated twiddle factors and 1/N scaling."""
    X = _transform(spectrum, 1, pad, workers, parallel_threshold)
    return X / X.size
