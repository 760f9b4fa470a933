import sys

from terminal_snake.cli import main

sys.exit(main())
