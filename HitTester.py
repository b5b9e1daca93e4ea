import numpy as np

DEFAULT_HIT_RADIUS = 10.0


def find_nearest(pointer_x, pointer_y, points, radius_threshold=DEFAULT_HIT_RADIUS):
    """Return the first point within radius_threshold of the pointer, or None.

    Points are scanned in the given order and the first hit wins, so with
    several points in range this is not necessarily the closest one.
    """
    points = list(points)
    if not points:
        return None

    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    distances = np.hypot(coords[:, 0] - pointer_x, coords[:, 1] - pointer_y)

    hits = np.flatnonzero(distances < radius_threshold)
    if hits.size == 0:
        return None
    return points[hits[0]]
