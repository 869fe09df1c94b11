import math
import numpy as np

def dft(x): # x is a sequence with length N (time domain)
    x = np.asarray(x, dtype=np.complex128).ravel()
    N = x.size
    if N == 0: raise ValueError('empty signal')
    X = np.zeros(N, dtype=np.complex128)
    for k in range(N):
        for n in range(N):
            angle = -2*math.pi*k*n/N
            X[k] += x[n] * complex(math.cos(angle), math.sin(angle))
    return X

def idft(X): # X is a sequence with length N (frequency domain)
    X = np.asarray(X, dtype=np.complex128).ravel()
    N = X.size
    if N == 0: raise ValueError('empty spectrum')
    x = np.zeros(N, dtype=np.complex128)
    for n in range(N):
        for k in range(N):
            angle = 2*math.pi*k*n/N
            x[n] += X[k] * complex(math.cos(angle), math.sin(angle))
        x[n] = x[n] / N
    return x
'''
Function DFT(x):
    N = length(x)
    For k from 0 to N-1:
        X[k] = sum over n of x[n] * (cos(angle) + i * sin(angle)), angle = -2*PI*k*n/N

Function IDFT(X):
    N = length(X)
    For n from 0 to N-1:
        x[n] = sum over k of X[k] * (cos(angle) + i * sin(angle)), angle = 2*PI*k*n/N
        x[n] = x[n] / N
'''
