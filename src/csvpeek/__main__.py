import sys

from csvpeek.cli import main

sys.exit(main())
