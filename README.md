# rubro_negro

Data structures and record helpers for Brazilian geographic and personal data.

- `rubro_negro.rbtree`: `RedBlackTree`, a left-leaning red-black tree ordered by
  a three-way comparison function you supply, with `Color`, `Node` and
  `color(node)`.
- `rubro_negro.state_list`: `StateList`, a collection of `State` records kept
  in ascending order of name, unique by name.
- `rubro_negro.models`: the `City`, `Person` and `State` dataclasses, their
  `describe()` methods, and the `compare_*_names` and `print_*` helpers.
- `rubro_negro.cep`, `rubro_negro.cpf`: formatting, validation, comparison,
  printing and reading of postal codes (CEP) and taxpayer numbers (CPF).
- `rubro_negro.date`: the `Date` dataclass, leap-year and month-length helpers,
  date and birth-date validation, and interactive entry of a birth date.
- `rubro_negro.console`: coloured terminal messages (`print_yellow`,
  `print_red`, `print_green`, `error_message`, `success_message`),
  `clear_screen`, `pause_screen`, and line-based input (`read_string`,
  `read_short_int`, `read_char`), plus `strip_spaces`.

The `read_*` functions read from `sys.stdin` by default, or from any text
stream passed to them; they raise `EOFError` when input runs out.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Keep cities in a red-black tree ordered by name:

```python
from rubro_negro.models import City, compare_city_names, print_city
from rubro_negro.rbtree import RedBlackTree

tree = RedBlackTree(compare_city_names)
tree.insert(City("Sao Paulo", 12000000))       # True
tree.insert(City("Rio de Janeiro", 6700000))   # True
tree.insert(City("Sao Paulo", 1))              # False: same name already stored
len(tree)                                      # 2

tree.print_all(print_city)                     # in order of name
[c.name for c in tree]                         # ['Rio de Janeiro', 'Sao Paulo']
found = tree.search(City("Rio de Janeiro"))    # the stored City, or None
```

`search` returns the stored item, not a node. `print_filtered(probe, printer)`
checks only the root item against the probe; every item of both subtrees is
printed.

Keep states in name order:

```python
from rubro_negro.models import State
from rubro_negro.state_list import StateList

states = StateList()
states.insert(State("Sao Paulo", "Sao Paulo", 645, 45000000))
states.insert(State("Minas Gerais", "Belo Horizonte", 853, 21000000))
[s.name for s in states]        # ['Minas Gerais', 'Sao Paulo']
states.find("Sao Paulo").capital
states.remove("Minas Gerais")   # True
states.display()                # prints each state's description
```

Postal codes and dates:

```python
from rubro_negro.cep import format_cep, validate_cep
from rubro_negro.date import Date, days_in_month, validate_birth_date

format_cep("01001-000")         # '01001-000'
validate_cep("01001-0000")      # True: ten characters, hyphen at position 5
days_in_month(2, 2024)          # 29
Date(1, 1, 1990).format()       # '01/01/1990'
validate_birth_date(Date(1, 1, 1990))
```

## Behaviour worth knowing

- `format_cep` keeps at most eight digits and always puts a hyphen at
  position 5, so its result is at most nine characters long, while
  `validate_cep` requires ten; `read_cep` therefore returns `None`.
- `validate_cpf` requires every character to be a digit and those at positions
  3 and 7 to be dots, so it accepts no string, and `read_cpf` returns `None`.
- `validate_date` accepts any date whose month is 1 to 12; only for other
  months does it check the day.

## What it does not do

The package is a library: it has no command-line program, no menus and no
storage. The tree has no removal, and records live only in memory.