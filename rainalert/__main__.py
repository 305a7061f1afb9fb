import sys

from rainalert.cli import main

sys.exit(main())
