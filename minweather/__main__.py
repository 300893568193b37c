import sys

from minweather.cli import main

sys.exit(main())
