#!/usr/bin/env python3

"""
Print the first words of the engine sequence for a seed, for comparing with other implementations
"""

from argparse import ArgumentParser

from randsimple import check_number, check_seed, SampleFormatter
from randsimple.xorshift import MASK32, advance, new_state

parser = ArgumentParser(formatter_class=SampleFormatter, description=__doc__)
parser.add_argument('seed', type=check_seed, help='seed in the last word of the state')
parser.add_argument('-c', '--count', type=lambda s: check_number(int, s, True),
                    help='how many words to print', default=10)
args = parser.parse_args()

args_seed: int = args.seed
args_count: int = args.count

state = new_state(args_seed)
print('state:', ' '.join('{:>10}'.format(w) for w in state))
for i in range(args_count):
    word = advance(state)
    print('{:>5}: dec {:>10}  hex {:08X}  [0,1] {:.17f}'.format(i, word, word, word / float(MASK32)))
print('state:', ' '.join('{:>10}'.format(w) for w in state))
