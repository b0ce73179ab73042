import sys

from bufficast.cli import main

sys.exit(main())
