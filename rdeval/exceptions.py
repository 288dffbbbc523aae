from typing import Optional, Tuple

from rdeval.common import Location
from rdeval.termui import s_attention as err
from rdeval.termui import s_header as _


class ParseError(Exception):
    """
    Base class for all evaluation failures. Carries the :class:`Location`
    where the failure was detected.
    """
    def __init__(self, location: Location,
                 message: str,
                 context_message: Optional[str] = None,
                 error_type: Optional[str] = None):

        self.location = location
        self.message = message
        self.context_message = context_message
        self.error_type = error_type or err("error")

        context = get_context(location, context_message) \
            if context_message else None

        self.full_message = "\n".join(
            filter(None, [f"{self.error_type}: {message}", context]))
        super().__init__(self.full_message)

    @property
    def position(self):
        return self.location.start_position

    @property
    def line(self):
        return self.location.line

    @property
    def column(self):
        return self.location.column

    def __str__(self):
        return f"{self.location}: {self.full_message}"


def get_line_col_at_position(text: str, pos: int) -> Tuple[Optional[int],
                                                           Optional[int],
                                                           Optional[str]]:
    lines = text.splitlines(keepends=True)

    if pos > len(text):
        return None, None, None

    # Empty input or position just past the last character
    if not lines:
        return 0, 0, ""
    if pos == len(text):
        return len(lines) - 1, len(lines[-1]), lines[-1].rstrip('\n\r')

    current_pos = 0
    for lineidx, line in enumerate(lines):
        if current_pos <= pos < current_pos + len(line):
            return lineidx, pos - current_pos, line.rstrip('\n\r')
        current_pos += len(line)
    return None, None, None


def get_context(location: Location, message: str) -> Optional[str]:
    """
    Returns the line of input the location points to followed by `message`
    under a marker placed at the location column.
    """
    if location.input_str is None or location.start_position is None:
        return None
    lineidx, colidx, line = get_line_col_at_position(location.input_str,
                                                     location.start_position)
    if lineidx is None:
        return None
    return _(f"{lineidx+1:>5} | ") + f"{line}\n" \
        + _("      | ") + " " * colidx + err("^ ") + message


class MismatchedParenthesesError(ParseError):
    def __init__(self, location: Location,
                 context_message: Optional[str] = None):
        if context_message is None:
            if location.is_eof():
                found = "end of input"
            else:
                found = f"'{location.input_str[location.start_position]}'"
            context_message = f"expected ')' or '+' or '*', found {found}"
        super().__init__(location,
                         f"mismatched parentheses at position "
                         f"{location.start_position}",
                         context_message=context_message,
                         error_type=err("syntax error"))


class InvalidNumberError(ParseError):
    def __init__(self, location: Location):
        if location.is_eof():
            found = "end of input"
        else:
            found = f"'{location.input_str[location.start_position]}'"
        super().__init__(location,
                         f"invalid number at position "
                         f"{location.start_position}",
                         context_message=f"expected number or '(', "
                         f"found {found}",
                         error_type=err("syntax error"))


class MalformedNumericLiteralError(ParseError):
    def __init__(self, location: Location, text: str):
        self.text = text
        super().__init__(location,
                         f"malformed numeric literal '{text}' at position "
                         f"{location.start_position}",
                         context_message="not a valid decimal number",
                         error_type=err("number error"))


class TrailingInputError(ParseError):
    def __init__(self, location: Location):
        super().__init__(location,
                         f"unexpected input at position "
                         f"{location.start_position}",
                         context_message="expected '+' or '*' or end of "
                         "input",
                         error_type=err("syntax error"))


class NestingTooDeepError(ParseError):
    def __init__(self, location: Location):
        super().__init__(location,
                         f"expression nested too deeply at position "
                         f"{location.start_position}",
                         context_message="recursion limit reached",
                         error_type=err("nesting error"))


class EvaluatorInitError(Exception):
    pass
