#!/usr/bin/env python3

"""
Plot histograms of samples from a few distributions to check their shape by eye
"""

from argparse import ArgumentParser
from os import path as p
import matplotlib.pyplot as plt
import numpy as np

from randsimple import check_number, check_seed, SampleFormatter
from randsimple.distributions import Geometric, HalfCauchy, Normal


def main():
    parser = ArgumentParser(formatter_class=SampleFormatter, description=__doc__)
    parser.add_argument('-s', '--seed', type=check_seed, action='append',
                        help='seed for the first engine state, repeat for the following ones')
    parser.add_argument('-n', '--quantity', type=lambda s: check_number(int, s, True),
                        help='how many samples to draw for each histogram', default=10_000)
    parser.add_argument('-b', '--bins', type=lambda s: check_number(int, s, True),
                        help='number of histogram bins', default=150)
    parser.add_argument('--save', metavar='DIR',
                        help='write PNG files into this directory instead of showing the figures')
    args = parser.parse_args()
    # assign to typed variables for convenience
    args_seeds: list[int] = args.seed if args.seed else [1192, 765]
    args_quantity: int = args.quantity
    args_bins: int = args.bins
    args_save: str | None = args.save

    if len(args_seeds) < 2:
        parser.error('at least two seeds are needed for the normal distribution')
    if args_save is not None and not p.isdir(args_save):
        parser.error(f'{args_save} is not a directory')

    normal = Normal(args_seeds[:2])
    standard = normal.samples(args_quantity)
    normal.try_set_params(-3.0, 2.0)
    shifted = normal.samples(args_quantity)

    plt.figure('Normal distribution')
    plt.hist(standard, bins=args_bins, range=(-10, 5), color='r', alpha=0.3,
             label=f'N(0, 1) mean {np.mean(standard):.3f} var {np.var(standard):.3f}')
    plt.hist(shifted, bins=args_bins, range=(-10, 5), color='b', alpha=0.3,
             label=f'N(-3, 2) mean {np.mean(shifted):.3f} var {np.var(shifted):.3f}')
    finish(args_save, 'normal.png')

    half_cauchy = HalfCauchy(args_seeds[0])
    values = half_cauchy.samples(args_quantity)
    half_cauchy.try_set_params(1.5)
    scaled = half_cauchy.samples(args_quantity)

    plt.figure('Half-Cauchy distribution')
    plt.hist(values, bins=args_bins, range=(0, 10), color='r', alpha=0.3, label='scale 1')
    plt.hist(scaled, bins=args_bins, range=(0, 10), color='b', alpha=0.3, label='scale 1.5')
    finish(args_save, 'half_cauchy.png')

    geometric = Geometric(args_seeds[0])
    trials = geometric.samples(args_quantity)
    geometric.try_set_params(0.2)
    rare = geometric.samples(args_quantity)

    plt.figure('Geometric distribution')
    edges = np.arange(0.5, 30.5)
    plt.hist(trials, bins=edges, color='r', alpha=0.3, label=f'p 0.5 (mean {np.mean(trials):.2f})')
    plt.hist(rare, bins=edges, color='b', alpha=0.3, label=f'p 0.2 (mean {np.mean(rare):.2f})')
    finish(args_save, 'geometric.png')


def finish(save_dir: str | None, file_name: str):
    """Label the current figure and show it or write it to `save_dir`"""
    plt.legend()
    plt.xlabel('Random variable x')
    plt.ylabel('Count')
    if save_dir is None:
        plt.show()
    else:
        file_path = p.join(save_dir, file_name)
        plt.savefig(file_path)
        print(f'Saved {file_path}')
        plt.close()


if __name__ == '__main__':
    main()
