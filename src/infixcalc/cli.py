from os import isatty
import sys
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import CalcError
from .state import Calculator, MIN_WIDTH


logger = logging.getLogger(__name__)


def _width(text):
    '''
    Display width argument, wide enough for the ellipsis and one character.
    '''
    width = int(text)
    if width < MIN_WIDTH:
        raise ArgumentTypeError('width must be at least {}'.format(MIN_WIDTH))
    return width


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Not persisted, on purpose.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line keypad for the calculator.

    Every line (or -e argument) is a run of keys: digits, + - * /, = and c to
    clear. The display is printed after each line.
    '''

    DEFAULT_PROMPT = '> '

    def executor(self):
        '''
        Feed every line to one calculator and print its display.
        '''
        calculator = Calculator(width=self.args.width)
        for line in self.args.expressions:
            try:
                print(calculator.feed(line.rstrip('\n')))
            # Abort entire rest of line
            except CalcError as e:
                print(e.reason, file=sys.stderr)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Keypad calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-w', '--width',
                                          type=_width,
                                          default=Calculator.DISPLAY_WIDTH)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.set_defaults(expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(levelname)s %(name)s: %(message)s',
            stream=sys.stderr)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        logger.debug('Reading keys from %r', self.args.expressions)
        try:
            self.executor()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
