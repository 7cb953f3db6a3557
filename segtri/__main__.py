import sys

from .core.driver import main

sys.exit(main())
