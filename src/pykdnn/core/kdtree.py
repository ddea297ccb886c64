"""
KD-Tree for exact 2-D nearest neighbor search

Nodes live in flat arrays indexed by reference-point id: node i stores
reference point i, its splitting axis and its two children (-1 if absent).
"""
import numpy as np
from typing import List

from .errors import EmptyReferenceSetError
from .params import DIMENSIONS
from .point import PointLike, QueryResult, as_reference_array, as_xy

LEFT = 0
RIGHT = 1


class KDTree:
    """
    Balanced k-d tree built once over a static reference set.

    Splitting axis alternates x / y by depth. For a node on axis a, every
    point in its left subtree has coordinate a strictly below the node's and
    every point in its right subtree has coordinate a >= the node's.

    Queries return exactly what brute_force.nearest returns, including the
    lowest-index tie-break.
    """

    def __init__(self, reference_set):
        self.data = as_reference_array(reference_set)
        n = len(self.data)

        self.children = np.full((n, 2), -1, dtype=np.int64)
        self.axis = np.full(n, -1, dtype=np.int8)
        self.root = -1
        self.depth = 0

        if n > 0:
            self.root = self._build_tree(np.arange(n, dtype=np.int64))

        self.children.setflags(write=False)
        self.axis.setflags(write=False)

        # Python lists are much faster than numpy scalars in the query loop
        self._xs: List[float] = self.data[:, 0].tolist()
        self._ys: List[float] = self.data[:, 1].tolist()
        self._left: List[int] = self.children[:, LEFT].tolist()
        self._right: List[int] = self.children[:, RIGHT].tolist()
        self._axis: List[int] = self.axis.tolist()

    @classmethod
    def build(cls, reference_set) -> "KDTree":
        """Build a tree over reference_set (an empty set gives an empty tree)"""
        return cls(reference_set)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def size(self) -> int:
        return len(self.data)

    def _split(self, indices: np.ndarray, axis: int) -> int:
        """
        Sort indices in place along axis and return the split position.

        The split starts at the median and moves left past equal coordinates,
        so everything before it is strictly less than the split value.
        """
        order = np.argsort(self.data[indices, axis], kind='stable')
        indices[:] = indices[order]
        coords = self.data[indices, axis]
        median = len(indices) // 2
        return int(np.searchsorted(coords, coords[median], side='left'))

    def _build_tree(self, indices: np.ndarray) -> int:
        """
        Build the tree over indices and return the root node id.

        Uses an explicit work stack: inputs with many duplicate coordinates
        can produce deep trees.
        """
        children = self.children
        root = -1

        # (indices, depth, parent, side)
        stack = [(indices, 0, -1, LEFT)]
        while stack:
            subset, depth, parent, side = stack.pop()
            if len(subset) == 0:
                continue

            axis = depth % DIMENSIONS
            mid = self._split(subset, axis)
            node = int(subset[mid])
            self.axis[node] = axis
            self.depth = max(self.depth, depth + 1)

            if parent < 0:
                root = node
            else:
                children[parent, side] = node

            stack.append((subset[mid + 1:], depth + 1, node, RIGHT))
            stack.append((subset[:mid], depth + 1, node, LEFT))

        return root

    def nearest(self, query: PointLike) -> QueryResult:
        """
        Exact nearest neighbor by branch and bound.

        The near child is searched before the far child. A far subtree is
        skipped only when the squared distance to its splitting line is
        strictly greater than the best distance so far; at equality it can
        still hold an equally close point with a lower index.

        Args:
            query: Query point, any finite (x, y)

        Returns:
            QueryResult(index, squared_distance)
        """
        if self.root < 0:
            raise EmptyReferenceSetError()

        qx, qy = as_xy(query)
        xs, ys = self._xs, self._ys
        left, right, axes = self._left, self._right, self._axis

        best_index = -1
        best_dist = float('inf')

        # (node, lower bound on squared distance to anything in its subtree)
        stack = [(self.root, 0.0)]
        while stack:
            node, bound = stack.pop()
            if bound > best_dist:
                continue

            # same expression as distance.squared_distance
            dx = xs[node] - qx
            dy = ys[node] - qy
            dist = dx * dx + dy * dy
            if (best_index < 0 or dist < best_dist
                    or (dist == best_dist and node < best_index)):
                best_dist = dist
                best_index = node

            if axes[node] == 0:
                diff = qx - xs[node]
            else:
                diff = qy - ys[node]

            if diff < 0:
                near, far = left[node], right[node]
            else:
                near, far = right[node], left[node]

            # far pushed first so near is popped first
            if far >= 0:
                stack.append((far, max(bound, diff * diff)))
            if near >= 0:
                stack.append((near, bound))

        return QueryResult(best_index, best_dist)

    def nearest_index(self, query: PointLike) -> int:
        return self.nearest(query).index

    def check_invariant(self) -> bool:
        """
        Verify the partition invariant for every node.

        Raises:
            ValueError: naming the first node whose subtree violates it
        """
        n = len(self.data)
        if n == 0:
            return True

        seen = 0
        # (node, per-axis lower bounds, per-axis upper bounds)
        lo = [-np.inf] * DIMENSIONS
        hi = [np.inf] * DIMENSIONS
        stack = [(self.root, lo, hi)]
        while stack:
            node, lo, hi = stack.pop()
            seen += 1
            point = self.data[node]
            for a in range(DIMENSIONS):
                if not (lo[a] <= point[a] < hi[a]):
                    raise ValueError(
                        f"node {node} has coordinate {point[a]} on axis {a} "
                        f"outside [{lo[a]}, {hi[a]})"
                    )

            axis = int(self.axis[node])
            split = point[axis]
            left, right = self.children[node]
            if left >= 0:
                child_hi = list(hi)
                child_hi[axis] = min(hi[axis], split)
                stack.append((int(left), lo, child_hi))
            if right >= 0:
                child_lo = list(lo)
                child_lo[axis] = max(lo[axis], split)
                stack.append((int(right), child_lo, hi))

        if seen != n:
            raise ValueError(f"tree reaches {seen} of {n} reference points")
        return True
