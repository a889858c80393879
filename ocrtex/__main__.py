import sys

from ocrtex.cli import main

sys.exit(main())
