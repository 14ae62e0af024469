"""Script expression classification.

Evaluate-style calls accept either a plain JavaScript expression
(``document.title``) or a function source (``() => document.title``).
The wire payload flags which one it is, so the binding has to decide
before serializing.
"""


def is_function_body(expression: str) -> bool:
    """Return True if *expression* looks like a function rather than a value.

    Matches ``function`` declarations, ``async`` functions and arrow
    functions::

        is_function_body("function () { return 1 }")   # True
        is_function_body("async () => 1")              # True
        is_function_body("(a, b) => a + b")            # True
        is_function_body("document.title")            # False
    """
    expression = expression.strip()
    return (
        expression.startswith("function")
        or expression.startswith("async ")
        or "=> " in expression
    )
