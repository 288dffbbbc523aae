import io
import logging
from rdeval.cursor import Cursor
from rdeval.exceptions import (EvaluatorInitError, InvalidNumberError,
                               MalformedNumericLiteralError,
                               MismatchedParenthesesError,
                               NestingTooDeepError, TrailingInputError)
from rdeval.termui import a_print, h_print, e_print
from rdeval import termui


logger = logging.getLogger(__name__)

# Usual whitespace set for the whitespace-skipping mode.
WS = '\n\r\t '

DIGITS = '0123456789'
NUMBER_CHARS = DIGITS + '.'
SPECIAL_CHARS = NUMBER_CHARS + '+*()'


class Evaluator(object):
    """
    One-pass recursive-descent evaluator for the grammar::

        Expression := Term ( '+' Term )*
        Term       := Factor ( '*' Factor )*
        Factor     := '(' Expression ')' | Number
        Number     := digit+ ( '.' digit+ )?

    Each production is a method taking the :class:`Cursor` of the current
    evaluation and returning a float. No tree is built. A new cursor is
    created for every call to :meth:`parse` so a single evaluator may be
    reused for any number of expressions.

    Args:
    ws(str): Characters to skip between tokens. `None` means the input must
        not contain whitespace.
    consume_input(bool): Require the whole input to form a single expression.
        If `False` trailing input is ignored.
    return_position(bool): Make :meth:`parse` return `(value, position)`.
    debug(bool): Trace evaluation steps to the terminal.
    debug_colors(bool): Use colors in the trace output.
    """
    def __init__(self, ws=None, consume_input=True, return_position=False,
                 debug=False, debug_colors=False):
        if ws:
            clashing = sorted(set(ws) & set(SPECIAL_CHARS))
            if clashing:
                raise EvaluatorInitError(
                    "Whitespace characters must not contain digits, '.' or "
                    "operators. Found: {}".format(", ".join(
                        f"'{c}'" for c in clashing)))
        self.ws = ws
        self.consume_input = consume_input
        self.return_position = return_position
        self.debug = debug
        self.debug_colors = debug_colors
        termui.colors = debug_colors

    def parse_file(self, file_name):
        """
        Evaluates the expression contained in the given file.
        Args:
            file_name(str): A file name.
        """
        with io.open(file_name, 'r', encoding='utf-8') as f:
            content = f.read()
        return self.parse(content, file_name=file_name)

    def parse(self, input_str, file_name=None):
        """
        Evaluates the given expression string.
        Args:
            input_str(str): The expression to evaluate.
            file_name(str): File name if applicable. Used in error reporting.
        """
        if self.debug:
            a_print("*** EVALUATION STARTED", new_line=True)
            h_print("Input:", repr(input_str), level=1)

        cursor = Cursor(input_str, ws=self.ws, file_name=file_name)
        try:
            result = self._expression(cursor)
        except RecursionError as e:
            raise NestingTooDeepError(cursor.location()) from e
        cursor.skip_ws()

        if not cursor.at_end():
            if self.consume_input:
                if cursor.peek() == ')':
                    raise MismatchedParenthesesError(
                        cursor.location(), "no matching '('")
                raise TrailingInputError(cursor.location())
            logger.warning("Ignoring trailing input at position %d: %r",
                           cursor.position,
                           input_str[cursor.position:cursor.position + 10])

        if self.debug:
            a_print("*** EVALUATION FINISHED", new_line=True)
            h_print("Result:", result, level=1)

        if self.return_position:
            return result, cursor.position
        return result

    def _expression(self, cursor):
        result = self._term(cursor)
        cursor.skip_ws()
        while cursor.peek() == '+':
            cursor.advance()
            operand = self._term(cursor)
            if self.debug:
                h_print("Add:", f"{result} + {operand}", level=1)
            result += operand
            cursor.skip_ws()
        return result

    def _term(self, cursor):
        result = self._factor(cursor)
        cursor.skip_ws()
        while cursor.peek() == '*':
            cursor.advance()
            operand = self._factor(cursor)
            if self.debug:
                h_print("Multiply:", f"{result} * {operand}", level=1)
            result *= operand
            cursor.skip_ws()
        return result

    def _factor(self, cursor):
        cursor.skip_ws()
        if cursor.peek() != '(':
            return self._number(cursor)

        open_position = cursor.position
        cursor.advance()
        result = self._expression(cursor)
        cursor.skip_ws()
        if cursor.peek() != ')':
            if self.debug:
                a_print("Unclosed '(' opened at position", open_position,
                        level=1)
            raise MismatchedParenthesesError(cursor.location())
        cursor.advance()
        return result

    def _number(self, cursor):
        start_position = cursor.position
        while cursor.peek() is not None and cursor.peek() in NUMBER_CHARS:
            cursor.advance()

        if cursor.position == start_position:
            raise InvalidNumberError(cursor.location())

        text = cursor.input_str[start_position:cursor.position]
        try:
            value = float(text)
        except ValueError as e:
            raise MalformedNumericLiteralError(
                cursor.location(start_position), text) from e

        if self.debug:
            e_print("Number:", f"{text} at position {start_position}",
                    level=1)
        return value


def evaluate(input_str, **kwargs):
    """
    Evaluates `input_str` with a new :class:`Evaluator` built from `kwargs`.
    """
    return Evaluator(**kwargs).parse(input_str)
