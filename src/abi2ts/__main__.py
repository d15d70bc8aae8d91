import sys

from abi2ts.cli import main

sys.exit(main())
