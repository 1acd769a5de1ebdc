"""
Movie stars: selection on a collider.

Beauty and talent are independent in the population. Stars are the top 15%
by beauty + talent, and among stars the two are negatively correlated.

Saves the scatter plot to stars.png and the table to stars.html.
"""

import logging

import matplotlib.pyplot as plt

from badcontrol import run_scenario
from badcontrol.render.diagram import draw_scatter
from badcontrol.render.table import to_html
from badcontrol.scenarios import SELECTION
from badcontrol.scenarios.selection import conditional_correlation, scatter_data

logging.basicConfig(level=logging.INFO)

result = run_scenario(SELECTION)
df = result.dataset
print(result.summary())

print(f"corr(beauty, talent), everyone : {conditional_correlation(df, 'beauty', 'talent'):>7.3f}")
print(f"corr(beauty, talent), stars    : {conditional_correlation(df, 'beauty', 'talent', where='star'):>7.3f}")

points, line = scatter_data(df)
ax = draw_scatter(points, "talent", "beauty", marker="star", line=line, title="Beauty and talent")
ax.set_xlim(-4, 4)
ax.set_ylim(-4, 4)
plt.savefig("stars.png", bbox_inches="tight")

with open("stars.html", "w") as f:
    f.write(to_html(result.table, caption=SELECTION.title))
