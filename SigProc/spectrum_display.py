import numpy as np
import matplotlib.pyplot as plt
from .signal_io import check_samplerate

def spectrum_display(signal, spectrum, samplerate:float|None = None, title:str|None = None, show:bool = True):
    check_samplerate(samplerate)
    signal = np.asarray(signal, dtype=np.complex128).ravel()
    spectrum = np.asarray(spectrum, dtype=np.complex128).ravel()
    N = spectrum.size
    d = 1.0 if samplerate is None else 1.0 / samplerate
    freq = np.fft.fftshift(np.fft.fftfreq(N, d=d))
    t = np.arange(signal.size) * d

    f, ax = plt.subplots(2, 1, figsize=(8,6))
    ax[0].set_title("Signal")
    ax[0].plot(t, signal.real, label='real')
    if np.any(signal.imag): ax[0].plot(t, signal.imag, label='imag')
    ax[0].set_xlabel('Time (s)' if samplerate else 'Sample')
    ax[0].legend()

    # DC in the middle
    ax[1].set_title("Magnitude spectrum")
    ax[1].stem(freq, np.abs(np.fft.fftshift(spectrum)))
    ax[1].set_xlabel('Frequency (Hz)' if samplerate else 'Cycles / sample')
    ax[1].set_ylabel('|X|')
    for a in ax:
        a.spines['top'].set_visible(False)
        a.spines['right'].set_visible(False)
    if title: f.suptitle(title, weight='bold')
    f.tight_layout()
    if show: plt.show()
    return f
