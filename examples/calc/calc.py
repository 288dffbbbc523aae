from rdeval import Evaluator, ParseError

expressions = [
    "2 + 3 * (4 + 5",
    "2 + 3 * (4 + 5)",
    "2 + 3 * 4",
    "(2 + 3) * 4",
    "2 * (3 + 4) * (5 + 6)",
    "1.5 + 2.5 * 3",
]

expected = [
    None,
    29.,
    14.,
    20.,
    154.,
    9.,
]


def main(debug=False):
    evaluator = Evaluator(debug=debug, debug_colors=debug)

    for expression, result in zip(expressions, expected):
        print("\nExpression:", expression)
        try:
            res = evaluator.parse("".join(expression.split()))
        except ParseError as e:
            assert result is None
            print("Error:", e)
            continue
        assert res == result
        print("Result =", res)


if __name__ == "__main__":
    main(debug=True)
