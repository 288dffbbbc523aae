#!/usr/bin/env python
import re
import sys
import click
from rdeval import Evaluator, ParseError, WS
from rdeval.termui import prints, a_print, h_print
import rdeval.termui as t


@click.group()
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.pass_context
def rdeval(ctx, debug, no_colors):
    """
    Command line interface for evaluating arithmetic expressions.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors}


def evaluation_options(f):
    f = click.option('--allow-trailing', default=False, is_flag=True,
                     help="Ignore input left after a complete "
                     "expression.")(f)
    f = click.option('--ws', 'skip_ws', default=False, is_flag=True,
                     help="Skip whitespace between tokens.")(f)
    f = click.option('--strip-ws', default=False, is_flag=True,
                     help="Remove all whitespace before evaluation.")(f)
    return f


@rdeval.command('eval')
@click.argument('expressions', nargs=-1, required=True)
@evaluation_options
@click.pass_context
def eval_(ctx, expressions, strip_ws, skip_ws, allow_trailing):
    evaluator = create_evaluator(ctx, skip_ws, allow_trailing)
    failed = evaluate_all(evaluator,
                          [(expr, None, None) for expr in expressions],
                          strip_ws)
    if failed:
        sys.exit(1)


@rdeval.command('file')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@evaluation_options
@click.pass_context
def file_(ctx, input_file, strip_ws, skip_ws, allow_trailing):
    """
    Evaluates each non-blank line of INPUT_FILE as a separate expression.
    """
    evaluator = create_evaluator(ctx, skip_ws, allow_trailing)
    try:
        with open(input_file, encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (UnicodeDecodeError, OSError) as e:
        a_print("Error:", f"can't read '{input_file}': {e}")
        sys.exit(1)
    expressions = [(line, input_file, lineno)
                   for lineno, line in enumerate(lines, start=1)
                   if line.strip()]
    failed = evaluate_all(evaluator, expressions, strip_ws)
    if failed:
        sys.exit(1)


def create_evaluator(ctx, skip_ws, allow_trailing):
    evaluator = Evaluator(ws=WS if skip_ws else None,
                          consume_input=not allow_trailing,
                          debug=ctx.obj['debug'],
                          debug_colors=ctx.obj['colors'])
    t.colors = ctx.obj['colors']
    return evaluator


def evaluate_all(evaluator, expressions, strip_ws):
    """
    Evaluates and reports each expression, continuing past failures.
    Returns the number of failed expressions.
    """
    failed = 0
    for expression, file_name, lineno in expressions:
        h_print("Expression:", expression, new_line=True)
        if strip_ws:
            expression = re.sub(r'\s+', '', expression)
        try:
            result = evaluator.parse(expression, file_name=file_name)
        except ParseError as e:
            failed += 1
            if lineno is not None:
                a_print("Error:", f"line {lineno}: {e}")
            else:
                a_print("Error:", str(e))
            continue
        prints(f"Result: {result}")

    if len(expressions) > 1:
        h_print("Evaluated:",
                f"{len(expressions)} expressions, {failed} failed",
                new_line=True)
    return failed


if __name__ == '__main__':
    rdeval()
