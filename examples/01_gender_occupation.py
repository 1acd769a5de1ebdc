"""
Controlling for occupation when estimating wage discrimination.

Discrimination affects wages directly (-1) and through occupation (-2).
Occupation is also driven by ability, which is unobserved in practice.
Adding occupation as a control does not isolate the direct effect: it
opens a path through ability and flips the sign.

Saves the DAG to gender_dag.png.
"""

import logging

import matplotlib.pyplot as plt

from badcontrol import run_scenario
from badcontrol.render.diagram import draw_dag
from badcontrol.scenarios import GENDER

logging.basicConfig(level=logging.INFO)

result = run_scenario(GENDER)
print(result.summary())

for r in result.results:
    print(f"{r.spec.display_label:<22} discrim = {r['discrim'].estimate:>7.3f}")
print("True direct effect     discrim =  -1.000")

pos = {
    "female": (0, 1), "discrim": (1, 1), "occupation": (2, 1),
    "wage": (3, 1), "ability": (2.5, 0),
}
draw_dag(GENDER.graph, pos=pos, title="Gender discrimination")
plt.savefig("gender_dag.png", bbox_inches="tight")
