"""
Resolves computed values in a simple `key = expression` settings text.
Expressions may contain whitespace and the value of a key must be a complete
expression.
"""
from rdeval import Evaluator, WS, ParseError

settings = """
workers = 2 * (3 + 1)
timeout = 1.5 * 4 + 0.5
buffer  = 64 * 1024
retries = 3 +
"""


def resolve(text, evaluator):
    values = {}
    errors = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        key, expression = [part.strip() for part in line.split('=', 1)]
        try:
            values[key] = evaluator.parse(expression, file_name=key)
        except ParseError as e:
            errors[key] = e
    return values, errors


def main(debug=False):
    evaluator = Evaluator(ws=WS, debug=debug)
    values, errors = resolve(settings, evaluator)

    assert values == {'workers': 8., 'timeout': 6.5, 'buffer': 65536.}
    assert list(errors) == ['retries']

    for key, value in values.items():
        print(f"{key} = {value}")
    for key, error in errors.items():
        print(error)


if __name__ == "__main__":
    main(debug=True)
