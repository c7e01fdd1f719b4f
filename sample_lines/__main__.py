import sys

from sample_lines.cli import main

sys.exit(main())
