"""
Renderers for display tables, causal graphs and scatter data.

``table`` needs pandas (and jinja2 for HTML); ``diagram`` needs matplotlib
and networkx, installed with the ``render`` extra.
"""
