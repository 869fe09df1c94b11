import argparse
import os
import sys
import numpy as np
from . import batch
from . import bench
from . import signal_io
from .matvec import matvec

def positive_float(value):
    f = float(value)
    if not f > 0: raise argparse.ArgumentTypeError(f"{value} must be > 0")
    return f

def main(argv=None):
    parser = argparse.ArgumentParser(description="Recursive FFT CLI tools")
    subparser = parser.add_subparsers(dest='command',help='Available Commands')

    parser_fft = subparser.add_parser('fft',help='FFT of signal files (.npy/.txt/.csv), save <name>_fft')
    group_fft = parser_fft.add_mutually_exclusive_group(required=True)
    group_fft.add_argument('--dir',type=str)
    group_fft.add_argument('--filepath',type=str)
    parser_fft.add_argument('--filter',type=str,default="",help='only files containing this string (with --dir)')
    parser_fft.add_argument('--pad',action='store_true',help='zero pad to next power of two instead of rejecting')
    parser_fft.add_argument('--window',type=str,help='window name for scipy.signal.get_window, ex. hann')
    parser_fft.add_argument('--samplerate',type=positive_float,help='sample rate in Hz, used for csv frequency column and plot')
    parser_fft.add_argument('--workers',type=int,help='threads for the top level split, default 1')
    parser_fft.add_argument('--out-ext',dest='out_ext',choices=['npy','csv'],help='output format, default npy')
    parser_fft.add_argument('--plot',action='store_true',help='show signal and spectrum')

    parser_ifft = subparser.add_parser('ifft',help='inverse FFT of spectrum files, save <name>_ifft.npy')
    group_ifft = parser_ifft.add_mutually_exclusive_group(required=True)
    group_ifft.add_argument('--dir',type=str)
    group_ifft.add_argument('--filepath',type=str)
    parser_ifft.add_argument('--filter',type=str,default="")
    parser_ifft.add_argument('--pad',action='store_true')
    parser_ifft.add_argument('--workers',type=int)

    parser_bench = subparser.add_parser('bench',help='time fft against numpy.fft')
    parser_bench.add_argument('--max-exp',dest='max_exp',type=int,help='largest N = 2^max_exp, default 12')
    parser_bench.add_argument('--samples',type=int,help='signals per N, default 5')
    parser_bench.add_argument('--seed',type=int)

    parser_matvec = subparser.add_parser('matvec',help='loop matrix-vector product of two .npy files')
    parser_matvec.add_argument('--matrix',type=str,required=True)
    parser_matvec.add_argument('--vector',type=str,required=True)
    parser_matvec.add_argument('--out',type=str)

    args = parser.parse_args(argv)

    if args.command == 'fft' or args.command == 'ifft':
        if args.dir:
            path = args.dir; filename = ""
        else:
            path = os.path.dirname(args.filepath) or '.'; filename = os.path.basename(args.filepath)
        if args.command == 'fft':
            outputs = batch.batch_process(batch.call_fft, path=path, filename=filename, filter=args.filter,
                                          pad=args.pad, window=args.window, samplerate=args.samplerate,
                                          workers=args.workers, out_ext=args.out_ext, display=args.plot)
        else:
            outputs = batch.batch_process(batch.call_ifft, path=path, filename=filename, filter=args.filter,
                                          pad=args.pad, workers=args.workers, lister=signal_io.list_spectra)
        if args.filepath and not outputs: return 1
        return 0
    if args.command == 'bench':
        df = bench.compare(max_exp=args.max_exp, samples=args.samples, seed=args.seed)
        print(df.to_string(index=False))
        return 0 if df['allclose'].all() else 1
    if args.command == 'matvec':
        for f in (args.matrix, args.vector):
            if not os.path.exists(f): print(f'path {f} not exist'); return 1
        try:
            y = matvec(signal_io.load_npy(args.matrix), signal_io.load_npy(args.vector))
        except ValueError as e:
            print(e); return 1
        print(y)
        if args.out:
            np.save(args.out, y); print(f'saved {args.out}')
        return 0
    parser.print_help()
    return 0

if __name__ == "__main__":
    sys.exit(main())
