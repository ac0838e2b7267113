"""Allow ``python -m infixcalc``."""

from infixcalc.cli import main

main()
