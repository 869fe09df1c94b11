############################
# signal / spectrum files
# - .npy        numpy array
# - .txt .csv   one sample per line, plain real or 1+2j
# - spectrum .csv with bin, frequency, real, imag, magnitude, phase
############################

import os
import pickle
import numpy as np
import pandas as pd

SIGNAL_EXT = ('.npy', '.txt', '.csv')

def load_npy(filepath:str):
    # empty / truncated / corrupt files all come back as ValueError
    try:
        return np.load(filepath)
    except (EOFError, OSError, pickle.UnpicklingError) as e:
        raise ValueError(f'{filepath}: cannot read npy file ({e})') from e

def load_signal(filepath:str):
    ext = os.path.splitext(filepath)[1].lower()
    if ext == '.npy':
        signal = load_npy(filepath)
    elif ext in ('.txt', '.csv'):
        delimiter = ',' if ext == '.csv' else None
        signal = np.loadtxt(filepath, dtype=complex, delimiter=delimiter, ndmin=1)
    else:
        raise ValueError(f'{filepath}: unsupported signal file, use one of {SIGNAL_EXT}')
    signal = np.atleast_1d(np.asarray(signal))
    # one sample per line: (N,), (N,1) or (1,N), never interleave columns
    if signal.ndim > 1 and sum(s != 1 for s in signal.shape) > 1:
        raise ValueError(f'{filepath}: expected a single column of samples, got shape {signal.shape}')
    return signal.ravel()

def check_samplerate(samplerate:float|None):
    if samplerate is not None and not samplerate > 0:
        raise ValueError(f'samplerate = {samplerate}, must be > 0')

def spectrum_table(spectrum, samplerate:float|None = None):
    check_samplerate(samplerate)
    spectrum = np.asarray(spectrum, dtype=np.complex128).ravel()
    N = spectrum.size
    # fftfreq with d = 1/fs gives Hz, without fs it is cycles per sample
    d = 1.0 if samplerate is None else 1.0 / samplerate
    return pd.DataFrame({
        'bin': np.arange(N),
        'frequency': np.fft.fftfreq(N, d=d),
        'real': spectrum.real,
        'imag': spectrum.imag,
        'magnitude': np.abs(spectrum),
        'phase': np.angle(spectrum),
    })

def save_spectrum(filepath:str, spectrum, samplerate:float|None = None):
    ext = os.path.splitext(filepath)[1].lower()
    if ext == '.npy':
        np.save(filepath, np.asarray(spectrum, dtype=np.complex128))
    elif ext == '.csv':
        spectrum_table(spectrum, samplerate).to_csv(filepath, index=False)
    else:
        raise ValueError(f'{filepath}: spectrum can only be saved as .npy or .csv')
    return filepath

def output_name(filename:str, suffix:str, ext:str|None = None):
    # 'sig_001.txt' -> 'sig_001_fft.npy'
    stem, old_ext = os.path.splitext(filename)
    if ext is None: ext = old_ext
    if not ext.startswith('.'): ext = '.' + ext
    return stem + '_' + suffix + ext

def list_signals(path:str, filter:str = ""):
    filelist = [f for f in sorted(os.listdir(path)) if f.lower().endswith(SIGNAL_EXT)]
    # skip outputs of earlier runs
    filelist = [f for f in filelist if not os.path.splitext(f)[0].endswith(('_fft', '_ifft'))]
    if filter != "": filelist = [f for f in filelist if f.find(filter)!=-1]
    return filelist

def list_spectra(path:str, filter:str = ""):
    # fft outputs saved as npy, the csv table is not read back
    filelist = [f for f in sorted(os.listdir(path)) if f.lower().endswith('_fft.npy')]
    if filter != "": filelist = [f for f in filelist if f.find(filter)!=-1]
    return filelist
