import sys

from vecrace.cli import main

sys.exit(main())
