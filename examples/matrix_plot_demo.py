"""
Example: dense and sparse Jacobians rendered in value, log and structure mode.

The sparse Jacobian stores an explicit zero at (6, 0): it is invisible in the
value plot and visible in the structure plot. Pass --show to open a
matplotlib window.
"""

import sys

import numpy as np

from solvercore.viz import MatrixPlotCommand, PlotSequence, SparseMatrixView

PATTERN = {
    0: (0, 4, 5),
    1: (0, 2, 6),
    2: (0, 2, 6),
    3: (0, 1, 2, 5),
    4: (2, 4),
    5: (2, 4),
    6: (2, 4, 5, 6),
}


def build_jacobians():
    dense = np.zeros((7, 7))
    sparse = SparseMatrixView(7, 7)
    for row, cols in PATTERN.items():
        for col in cols:
            dense[row, col] = row + 1.0
            sparse.insert(row, col, row + 1.0)
    sparse.insert(6, 0, 0.0)
    return dense, sparse


def main():
    dense, sparse = build_jacobians()
    seq = PlotSequence(grid=(3, 2))
    for mode, label in (("value", ""), ("log", " (log)"), ("structure", " (structure)")):
        seq.comment(f"Dense matrix{label}").plot_matrix(dense, mode)
        seq.comment(f"Sparse matrix{label}").plot_matrix(sparse, mode)

    for command in seq:
        if isinstance(command, MatrixPlotCommand):
            print(f"  {command.plot_type.value} plot {command.shape}")
        else:
            print(f"# {command.text}")

    if "--show" in sys.argv:
        from matplotlib import pyplot as plt

        from solvercore.viz.matplotlib_backends import draw_sequence

        draw_sequence(seq)
        plt.show()


if __name__ == "__main__":
    main()
