"""Allow ``python -m imggen``."""

from imggen.main import run

if __name__ == "__main__":
    run()
