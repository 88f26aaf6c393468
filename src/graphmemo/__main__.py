import sys

from graphmemo.cli import main

sys.exit(main())
