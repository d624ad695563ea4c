import sys

from rankwindow.main import cli

sys.exit(cli())
