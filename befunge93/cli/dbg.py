""" Debugger command line utility. """


import argparse
from .base import base_parser, machine_parser, create_interpreter, LogSetup
from ..dbg import DebugCli


parser = argparse.ArgumentParser(
    description=__doc__, parents=(machine_parser, base_parser))
parser.add_argument(
    'source', metavar='source', type=argparse.FileType('r'),
    help='Befunge source file')


def dbg(args=None):
    """ Run dbg from command line """
    args = parser.parse_args(args)
    with LogSetup(args):
        src = args.source.read()
        args.source.close()
        interpreter = create_interpreter(args)
        cli = DebugCli(interpreter, src)
        cli.cmdloop()


if __name__ == '__main__':
    dbg()
