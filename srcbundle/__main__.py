# Allow running: python -m srcbundle
from srcbundle.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
