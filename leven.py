#!/usr/bin/env python3


"""Prints the Levenshtein distance and cost matrix for two strings."""


import argparse
import logging
import sys


from costs import DEL_COST, INS_COST, SUB_COST
from levenshtein import Levenshtein, script
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> None:
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument('seq1', help='first sequence')
    arg_parser.add_argument('seq2', help='second sequence')
    arg_parser.add_argument('--insert-cost', type=int, default=INS_COST)
    arg_parser.add_argument('--replace-cost', type=int, default=SUB_COST)
    arg_parser.add_argument('--delete-cost', type=int, default=DEL_COST)
    arg_parser.add_argument('--script', action='store_true',
            help='also print the operations leading to the last cell')
    arg_parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for a summary, twice for every cell.')
    args = arg_parser.parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    lev = Levenshtein()
    lev.set_insert_cost(args.insert_cost)
    lev.set_replace_cost(args.replace_cost)
    lev.set_delete_cost(args.delete_cost)
    results = lev.calculate(args.seq1, args.seq2)
    print(f'Distance: {results.distance}')
    print(f'Array: {[list(row) for row in results.sequence]}')
    if args.script:
        print('Script: ' + ' '.join(op.name for op in script(results)))


if __name__ == '__main__':
    main(sys.argv[1:])
