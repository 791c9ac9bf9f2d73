import sys

from bindb.cli import main

sys.exit(main())
