import sys

from gomoji.cli.main import main

sys.exit(main())
