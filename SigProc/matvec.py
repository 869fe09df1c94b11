import numpy as np

def matvec(A, x):
    # y[i] = sum_j A[i,j] * x[j], loop version
    A = np.asarray(A); x = np.asarray(x)
    if A.ndim != 2: raise ValueError(f'A must be 2-D, got shape {A.shape}')
    if x.ndim != 1: raise ValueError(f'x must be 1-D, got shape {x.shape}')
    m, n = A.shape
    if x.shape[0] != n: raise ValueError(f'shape mismatch: A is {A.shape}, x is {x.shape}')
    # output type fixed up front, not from the first product
    y = np.zeros(m, dtype=np.result_type(A, x))
    for i in range(m):
        for j in range(n):
            y[i] += A[i, j] * x[j]
    return y
