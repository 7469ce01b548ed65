# exercisekit

A collection of small, classic programming exercises packaged as a Python
library with console commands: stack-based expression conversion and
evaluation, a menu-driven calculator, recursion classics, nested arrays and a
greeting.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Expressions (`exercisekit.expressions`)

Conversion and evaluation of expressions written with single-character
operands and the operators `+ - * / ^`. Whitespace is ignored.

```python
from exercisekit.expressions import (
    precedence,
    infix_to_postfix,
    infix_to_prefix,
    evaluate_postfix,
    evaluate_prefix,
)

precedence("^")             # 3
precedence("*")             # 2
precedence("+")             # 1
precedence("(")             # -1
infix_to_postfix("a+b*c")   # "abc*+"
infix_to_prefix("a+b*c")    # "+a*bc"
evaluate_postfix("23*4+")   # 10
evaluate_prefix("+*234")    # 10
```

- Operands for conversion are ASCII letters and digits.
- Evaluation accepts single-digit operands and the operators `+ - * /`, using
  integer arithmetic; division truncates toward zero.
- `ExpressionError` (a `ValueError`) is raised for unbalanced parentheses,
  unknown operators, missing operands, leftover operands and division by zero.

## Calculator (`exercisekit.calculator`)

`Operation` is an `IntEnum` numbered as on the menu: `ADD = 1`,
`SUBTRACT = 2`, `MULTIPLY = 3`, `DIVIDE = 4`, each with a `symbol` property.

```python
from exercisekit.calculator import Operation, calculate, format_result

result = calculate(Operation.DIVIDE, 6, 3)              # 2.0
format_result(Operation.DIVIDE, 6, 3, result)           # "Result: 6.00 / 3.00 = 2.00"
```

Dividing by zero raises `CalculatorError`. `run(stdin, stdout)` drives the
menu loop over any pair of text streams: it shows the menu, reads a choice and
two numbers, prints the result, and repeats until choice `5` or the end of
input. Invalid choices and numbers are reported and the menu shown again.

## Recursion (`exercisekit.recursion`)

- `summation(n)` – the sum `1 + 2 + … + n`; `ValueError` for negative `n`
- `factorial(n)` – `n!`; `ValueError` for negative `n`
- `fibonacci(n)` – the `n`-th Fibonacci number, with `fibonacci(0) == 0`;
  `ValueError` for negative `n`
- `fibonacci_series(count)` – a generator of the first `count` Fibonacci numbers
- `reverse_string(text)` – the text reversed

## Arrays (`exercisekit.arrays`)

```python
from exercisekit.arrays import build_array, format_array

grid = build_array((2, 3), range(6))   # [[0, 1, 2], [3, 4, 5]]
print(format_array(grid), end="")
# The array:
# 0	1	2
# 3	4	5
```

`build_array(shape, values)` arranges values in row-major order into nested
lists of one to three dimensions, raising `ValueError` for a bad shape or the
wrong number of values. `format_array(array)` renders tab-separated rows; three
dimensional arrays are printed layer by layer under `Depth <i>:` headings.
`run(stdin, stdout)` asks which kind of array to build, reads its size and
elements, and prints it.

## Greeting (`exercisekit.greeting`)

`greet(name)` returns `Hello <name>`.

## Commands

```
exercisekit-expressions {to-postfix,to-prefix,eval-postfix,eval-prefix} [EXPRESSION]
exercisekit-calculator
exercisekit-recursion {sum,factorial,fibonacci,reverse} [VALUE]
exercisekit-arrays
exercisekit-greeting [NAME]
```

- `exercisekit-expressions` converts or evaluates the expression given, or
  prompts for one; errors go to standard error with exit status 1.
- `exercisekit-calculator` runs the calculator menu on standard input and output.
- `exercisekit-recursion` runs one exercise on the value given, or prompts for
  it; `sum` and `factorial` exit with status 1 for negative numbers.
- `exercisekit-arrays` builds and prints an array from standard input; malformed
  input is reported on standard error with exit status 1.
- `exercisekit-greeting` greets the name given, or the first word read from
  standard input.