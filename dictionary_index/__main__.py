import sys

from dictionary_index.cli.cli import main

sys.exit(main())
