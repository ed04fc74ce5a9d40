import io
import unittest
from befunge93.dbg import DebugCli
from befunge93.interpreter import BefungeInterpreter
from befunge93.streams import BufferIo


class DebugCliTestCase(unittest.TestCase):
    def do(self, src, commands):
        self.interpreter = BefungeInterpreter(io=BufferIo())
        stdin = io.StringIO('\n'.join(commands + ['quit']) + '\n')
        stdout = io.StringIO()
        cli = DebugCli(self.interpreter, src, stdin=stdin, stdout=stdout)
        cli.cmdloop()
        return stdout.getvalue()

    def test_step_and_stack(self):
        out = self.do('12+.@', ['step 3', 'stack'])
        self.assertIn("At x=3 y=0 '.'", out)
        self.assertIn('Stack: 3', out)

    def test_run_and_output(self):
        out = self.do('12+.@', ['run', 'output', 'step'])
        self.assertIn('Program has finished', out)
        self.assertIn('3\n', out)
        self.assertIn('Program is not running', out)

    def test_info(self):
        out = self.do('1@', ['info'])
        self.assertIn('Grid:      2x1', out)
        self.assertIn('RIGHT', out)
        self.assertIn('NORMAL', out)

    def test_grid(self):
        out = self.do('>v\n^<', ['step', 'grid'])
        self.assertIn('-> >v', out)
        self.assertIn('   ^<', out)
        self.assertIn('    ^', out)

    def test_put_get(self):
        out = self.do('12+.@', ['put 0,0,55', 'get 0,0', 'get 9,9'])
        self.assertIn("'7' = 55", out)
        self.assertIn('invalid coordinates x=9, y=9', out)
        self.assertEqual('72+.@', self.interpreter.grid[0])

    def test_put_invalid(self):
        out = self.do('12+.@', ['put 0,0,300'])
        self.assertIn('Error: Value 300 is not a valid ascii value', out)

    def test_error(self):
        out = self.do('1x@', ['step 5', 'stack'])
        self.assertIn("Error: Unknown instruction 'x'", out)
        self.assertIn('Stack: 1', out)

    def test_reload(self):
        out = self.do('1"@', ['run', 'reload', 'stack', 'output'])
        self.assertIn('Stack: <empty>', out)
        self.assertEqual(['1"@'], self.interpreter.grid)
        self.assertTrue(self.interpreter.running)

    def test_only_newlines(self):
        """ A source without cells is not a program """
        out = self.do('\n\n', ['step', 'grid', 'info'])
        self.assertIn('Program is not running', out)
        self.assertIn('No program loaded', out)
        self.assertFalse(self.interpreter.running)

    def test_bad_arguments(self):
        out = self.do('12+.@', ['put 1,2', 'step abc', 'get x', 'stack'])
        self.assertIn('Usage: put x,y,value', out)
        self.assertIn('Usage: step [count]', out)
        self.assertIn('Usage: get x,y', out)
        self.assertIn('Stack: <empty>', out)

    def test_unknown_command(self):
        out = self.do('@', ['frobnicate'])
        self.assertIn('Unknown command: frobnicate', out)


if __name__ == '__main__':
    unittest.main()
