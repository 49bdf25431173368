# examples/demo_hull.py
from __future__ import annotations

import logging
import sys

from cg2d import IncrementalHull2D, orient2d_naive, orient2d_robust

# шість точок, на яких наївний предикат ламає оболонку
POINTS = [
    (24.00000000000005, 24.000000000000053),
    (54.85, 6),
    (24.000000000000068, 24.000000000000071),
    (54.850000000000357, 61.000000000000121),
    (24, 6),
    (6, 6),
]


def build(pred):
    hull = IncrementalHull2D(pred, collinear="keep")
    hull.extend(POINTS)
    return hull


def plot(hulls, width=65, height=65):
    import matplotlib.pyplot as plt

    fig, axes = plt.subplots(1, len(hulls), figsize=(5 * len(hulls), 5))
    for ax, (title, h) in zip(axes, hulls.items()):
        vs = h.hull() + h.hull()[:1]
        ax.plot([p.x for p in vs], [p.y for p in vs], "k-")
        ax.plot([p[0] for p in POINTS], [p[1] for p in POINTS], "ro")
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)   # вісь y донизу, як на канві
        ax.set_aspect("equal")
        ax.set_title(title)
    plt.show()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    hulls = {
        "robust": build(orient2d_robust),
        "fragile": build(orient2d_naive),
    }
    for name, h in hulls.items():
        print(f"{name:8s} hull:", [tuple(p) for p in h.hull()])
        print(f"{name:8s} VALIDATION:", h.validate())

    if "--plot" in sys.argv:
        plot(hulls)
