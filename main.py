"""nk_message — format a monitoring message as XML, or purge old message files."""

import sys

from nk_message.cli import main

if __name__ == "__main__":
    sys.exit(main())
