import sys

from large_file_reader.cli import main

sys.exit(main())
