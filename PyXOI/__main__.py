import sys

from PyXOI.pyxoi import main

if __name__ == "__main__":
    sys.exit(main())
