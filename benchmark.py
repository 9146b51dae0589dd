# Entry point: runs the Array vs Linked list benchmark with default settings

import sys
from src.benchmark import main


if __name__ == "__main__":
    sys.exit(main())
