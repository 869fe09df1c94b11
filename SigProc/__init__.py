from .fft import fft, ifft, InvalidInputLength, is_power_of_two, next_power_of_two, pad_to_power_of_two, validate_length
from .dft import dft, idft
from .matvec import matvec

__version__ = '0.1.0'
