"""
Run every scenario. A configuration error in one is logged and the rest
still run.
"""

import logging

from badcontrol import run_all
from badcontrol.scenarios import ALL

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

for name, outcome in run_all(ALL).items():
    if outcome.ok:
        print(outcome.result.summary())
    else:
        print(f"{name}: FAILED: {outcome.error}")
