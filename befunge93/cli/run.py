""" Run a befunge-93 program """

import argparse
import logging
import sys
from .base import base_parser, machine_parser, create_interpreter, LogSetup


parser = argparse.ArgumentParser(
    description=__doc__, parents=[machine_parser, base_parser])
parser.add_argument(
    'source', metavar='source', nargs='?',
    type=argparse.FileType('r'), default=None,
    help='Befunge source file (standard input when omitted)')
parser.add_argument(
    '--max-steps', metavar='count', type=int, default=None,
    help='Stop after executing this many instructions')


def run(args=None):
    """ Run a befunge program from the command line """
    args = parser.parse_args(args)
    logger = logging.getLogger('run')
    with LogSetup(args):
        if args.source is None:
            src = sys.stdin.read()
        else:
            src = args.source.read()
            args.source.close()
        interpreter = create_interpreter(args)
        interpreter.load(src)
        if args.max_steps is None:
            interpreter.run()
        else:
            interpreter.running = True
            while interpreter.running and interpreter.is_loaded:
                if interpreter.steps >= args.max_steps:
                    logger.warning(
                        'Stopped after %s steps', interpreter.steps)
                    break
                interpreter.step()


if __name__ == '__main__':
    run()
