# examples/demo_predicate.py
from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from cg2d import sign_grid

if __name__ == "__main__":
    # -1 синій, 0 зелений, +1 червоний
    cmap = ListedColormap(["blue", "green", "red"])
    fig, axes = plt.subplots(1, 2, figsize=(10, 5))
    for ax, name in zip(axes, ("naive", "robust")):
        grid = sign_grid(name, nx=256, ny=256)
        counts = {int(s): int(c) for s, c in zip(*np.unique(grid, return_counts=True))}
        print(f"{name}: sign counts {counts}")
        ax.imshow(grid.T + 1, cmap=cmap, vmin=0, vmax=2, origin="upper", interpolation="nearest")
        ax.set_title(f"{name} orient2d")
        ax.set_xticks([]); ax.set_yticks([])
    plt.show()
