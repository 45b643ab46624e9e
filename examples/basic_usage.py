#!/usr/bin/env python3
"""
Example: Basic usage of DrillDown as a Python library
"""

from drilldown import DrillDown
from drilldown.logging_config import setup_logging

authors = """
AADLER AAKD AAKHTER AALLAN AANKHEN AANZLOVAR AAR AARDEN AARDO AARE AARON
AARONJJ AARONSCA AASSAD AAU AAYARS ABALAMA ABARCLAY ABCDEFGH ABE ABELEW
ABELTJE ABERGMAN ABERNDT ABEROHAM ABH ABHAS ABHIDHAR ZTURK ZUMMO ZUQIF
ZURAWSKI ZZCGUMK
""".split()

setup_logging(verbose=True)

tree = DrillDown(max_items=16).generate(authors)

# Keys are unordered; sort them for display
for key in sorted(tree):
    print(f"{key or '(all)'}: {', '.join(tree[key])}")

# Per-level limits and a case-insensitive slicer
names = ["O'Brien", "OBrien", "obrien", "Olsen", "Ortiz", "van der Berg", "Vance"]
tree = DrillDown(slicer="normalized", max_items=[4, 2]).generate(names)
for key in sorted(tree):
    print(f"{key}: {tree[key]}")
