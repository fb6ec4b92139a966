import sys

from typedwire.cli import main

sys.exit(main())
