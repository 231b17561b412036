"""Allow ``python -m intcalc``."""

from intcalc.cli import main

if __name__ == "__main__":
    main()
