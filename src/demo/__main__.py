import sys

from src.demo.runner import main

sys.exit(main())
