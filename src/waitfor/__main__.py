"""Module entrypoint for `python -m waitfor`."""

from waitfor.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
