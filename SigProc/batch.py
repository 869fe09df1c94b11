import os
import numpy as np
from scipy.signal import get_window
from . import signal_io
from . import spectrum_display
from .fft import fft, ifft, InvalidInputLength

def apply_window(signal, window:str|None = None):
    if window is None or window == "" or window == 'boxcar': return np.asarray(signal)
    return np.asarray(signal) * get_window(window, len(signal))

def call_fft(path:str = "", filename:str = "", pad:bool = False, window:str|None = None,
             samplerate:float|None = None, workers:int|None = 1, out_ext:str|None = 'npy', display:bool = False):
    print("call_fft", path, filename)
    if out_ext is None: out_ext = 'npy'
    if filename == "": print('empty filename'); return None
    if samplerate is not None and not samplerate > 0: print(f'samplerate = {samplerate}, must be > 0'); return None
    if not os.path.exists(os.path.join(path,filename)): print(f'path {os.path.join(path,filename)} not exist'); return None
    try:
        signal = signal_io.load_signal(os.path.join(path,filename))
    except ValueError as e:
        print(f'cannot read {filename}: {e}'); return None
    # window the real samples before fft pads them
    if window:
        try: signal = apply_window(signal, window)
        except ValueError as e: print(f'{filename}: window {window!r} failed: {e}'); return None
    try:
        spectrum = fft(signal, pad=pad, workers=workers)
    except InvalidInputLength as e:
        print(f'{filename}: {e}'); return None
    out = os.path.join(path, signal_io.output_name(filename, 'fft', out_ext))
    signal_io.save_spectrum(out, spectrum, samplerate=samplerate)
    print(f'saved {out}')
    if display: spectrum_display.spectrum_display(signal, spectrum, samplerate=samplerate, title=filename)
    return out

def call_ifft(path:str = "", filename:str = "", pad:bool = False, workers:int|None = 1):
    print("call_ifft", path, filename)
    if filename == "": print('empty filename'); return None
    if not os.path.exists(os.path.join(path,filename)): print(f'path {os.path.join(path,filename)} not exist'); return None
    try:
        spectrum = signal_io.load_signal(os.path.join(path,filename))
        signal = ifft(spectrum, pad=pad, workers=workers)
    except ValueError as e:
        # InvalidInputLength is a ValueError too
        print(f'{filename}: {e}'); return None
    out = os.path.join(path, signal_io.output_name(filename, 'ifft', 'npy'))
    np.save(out, signal)
    print(f'saved {out}')
    return out

def batch_process(func, path:str = "", filename:str|None = "", filter:str = "", lister=None, **kwargs):
    # lister picks the input files in directory mode, default signal files
    if lister is None: lister = signal_io.list_spectra if func is call_ifft else signal_io.list_signals
    if path == "": print('empty path'); return []
    if not os.path.exists(path): print(f'path {path} not exist'); return []
    if filename == "" or filename is None:
        filelist = lister(path, filter)
        print(filelist)
    else:
        filelist = [filename]
    outputs = []
    for f in filelist:
        print(f'filename = {f}')
        out = func(path, f, **kwargs)
        if out is not None: outputs.append(out)
    return outputs
