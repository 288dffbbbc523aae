# -*- coding: utf-8 -*-
# flake8: NOQA
from rdeval.evaluator import Evaluator, evaluate, WS
from rdeval.cursor import Cursor
from rdeval.common import Location, pos_to_line_col
from rdeval.exceptions import ParseError, EvaluatorInitError, \
    MismatchedParenthesesError, InvalidNumberError, \
    MalformedNumericLiteralError, TrailingInputError, NestingTooDeepError

from .version import __version__
