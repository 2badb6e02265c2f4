"""Run the microbench CLI with ``python -m microbench``."""

import sys

from microbench.run_benchmark import main

sys.exit(main())
