import sys

from objread.main import main

if __name__ == "__main__":
    sys.exit(main())
