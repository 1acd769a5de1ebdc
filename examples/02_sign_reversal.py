"""
Conditioning on a variable caused by both treatment and outcome.

y ~ d recovers the treatment effect of 50. Adding x, a child of both d
and y, drives the d coefficient to zero. Standard errors are HC1.
"""

import logging

from badcontrol import run_scenario
from badcontrol.scenarios import SIGN_REVERSAL

logging.basicConfig(level=logging.INFO)

result = run_scenario(SIGN_REVERSAL)
print(result.summary())

for r in result.results:
    for e in r.estimates[1:]:
        print(f"{r.spec.display_label:<10} {e.term} = {e.estimate:>8.3f}  (HC1 s.e. {e.std_err:.3f})")
