import sys

from astrodisplay.cli.main import main

sys.exit(main())
