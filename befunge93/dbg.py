""" Console based step debugger for befunge programs. """

import cmd
import logging
from . import __version__
from .common import BefungeError


def str2int(txt):
    txt = txt.strip()
    if txt.startswith('0x'):
        return int(txt[2:], 16)
    else:
        return int(txt)


class DebugCli(cmd.Cmd):
    """ Implement a console-based debugger interface. """
    prompt = 'BEF>'
    intro = "befunge93 interactive debugger"
    logger = logging.getLogger('dbg')

    def __init__(self, interpreter, source, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.use_rawinput = False
        self.interpreter = interpreter
        self.source = source
        self.interpreter.load(source)

    def show(self, *args):
        print(*args, file=self.stdout)

    def guarded(self, action):
        """ Run a machine action, reporting befunge errors """
        try:
            action()
        except BefungeError as ex:
            self.logger.debug('Machine error: %s', ex.msg)
            self.show('Error:', ex.msg)
            return False
        return True

    def do_quit(self, _):
        """ Quit the debugger """
        return True

    do_q = do_quit
    do_EOF = do_quit

    def do_info(self, _):
        """ Show the machine state """
        m = self.interpreter
        x, y = m.position
        self.show('befunge93 version:', __version__)
        self.show('Grid:      {}x{}'.format(m.width, m.height))
        self.show('Position:  x={} y={}'.format(x, y))
        self.show('Direction: ', m.direction.name)
        self.show('Mode:      ', m.mode.name)
        self.show('Running:   ', m.running)
        self.show('Steps:     ', m.steps)

    def do_step(self, arg):
        """ Single step the machine: step [count] """
        try:
            count = str2int(arg) if arg.strip() else 1
        except ValueError:
            self.show('Usage: step [count]')
            return
        for _ in range(count):
            if not self.interpreter.running:
                self.show('Program is not running')
                break
            if not self.guarded(self.interpreter.step):
                break
        self.show_position()

    do_s = do_step

    def do_run(self, _):
        """ Run the program until it halts """
        if self.guarded(self.interpreter.run):
            self.show('Program has finished')

    def do_stack(self, _):
        """ Show the stack, top first """
        values = list(reversed(self.interpreter.stack))
        self.show('Stack:', ' '.join(map(str, values)) or '<empty>')

    def do_output(self, _):
        """ Show the output produced so far """
        self.show(self.interpreter.output.decode('latin-1'))

    def do_grid(self, _):
        """ Show the program grid with the current position marked """
        x, y = self.interpreter.position
        for row, line in enumerate(self.interpreter.grid):
            marker = '->' if row == y else '  '
            self.show('{} {}'.format(marker, line))
        self.show('   ' + ' ' * x + '^')

    def do_put(self, arg):
        """ Write a cell: put x,y,value """
        try:
            x, y, value = map(str2int, arg.split(','))
        except ValueError:
            self.show('Usage: put x,y,value')
            return
        self.guarded(lambda: self.interpreter.put_cell(x, y, value))

    def do_get(self, arg):
        """ Read a cell: get x,y """
        try:
            x, y = map(str2int, arg.split(','))
        except ValueError:
            self.show('Usage: get x,y')
            return
        lines = self.interpreter.grid
        if 0 <= y < len(lines) and 0 <= x < len(lines[y]):
            char = lines[y][x]
            self.show('{!r} = {}'.format(char, ord(char)))
        else:
            self.show('Error: invalid coordinates x={}, y={}'.format(x, y))

    def do_reload(self, _):
        """ Load the original program again and clear stack and output """
        self.interpreter.clear_stack()
        self.interpreter.clear_output()
        self.interpreter.load(self.source)
        self.show_position()

    def show_position(self):
        if not self.interpreter.is_loaded:
            self.show('No program loaded')
            return
        x, y = self.interpreter.position
        char = self.interpreter.grid[y][x]
        self.show('At x={} y={} {!r}'.format(x, y, char))

    def default(self, line):
        self.show('Unknown command: {}'.format(line))

    def emptyline(self):
        pass
