import sys

from tokdecode.cli import main

sys.exit(main())
